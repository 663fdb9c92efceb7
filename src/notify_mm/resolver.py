"""Choose the payload to send from the action inputs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from notify_mm.config import Settings
from notify_mm.context import parse_context
from notify_mm.errors import FileAccessError, InvalidPayloadError, MissingInputError
from notify_mm.formatter import format_push
from notify_mm.payload import JsonPayload, Payload, RawPayload

logger = logging.getLogger(__name__)


def read_legacy_payload(path: Path) -> bytes | None:
    """Return the file's bytes, or ``None`` when it does not exist."""
    try:
        return path.read_bytes()
    except FileNotFoundError:
        logger.debug("File %s does not exist. Moving along ...", path)
        return None
    except OSError as exc:
        raise FileAccessError(
            f"You need to provide a valid readable file: {exc}"
        ) from exc


def resolve_payload(settings: Settings) -> Payload:
    """Pick exactly one payload source, first match wins.

    Order: legacy payload file, a recognised GitHub event, the PAYLOAD
    input, the TEXT input.
    """
    path = settings.legacy_payload_path
    if path is not None:
        data = read_legacy_payload(path)
        if data is not None:
            logger.debug("Will use the legacy payload file %s", path)
            return RawPayload(data)

    ctx = parse_context(settings.github_context)
    logger.info("Event name: %s", ctx.event_name)

    if ctx.event_name == "push":
        logger.debug("Will format the push event")
        return format_push(ctx)

    if settings.payload:
        logger.debug("Will use the PAYLOAD input as is")
        try:
            return JsonPayload(json.loads(settings.payload))
        except json.JSONDecodeError as exc:
            raise InvalidPayloadError(f"PAYLOAD is not valid JSON: {exc}") from exc

    if settings.text:
        logger.debug("Will use the TEXT input to generate the payload.")
        return JsonPayload(
            {
                "channel": settings.mattermost_channel,
                "username": settings.mattermost_username,
                "icon_url": settings.mattermost_icon_url,
                "text": settings.text,
            }
        )

    raise MissingInputError()
