"""Command-line entry point for the notification action."""

import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from typing import NoReturn

import httpx
from pydantic import ValidationError

from notify_mm.base import Notifier
from notify_mm.config import Settings
from notify_mm.errors import ConfigurationError, MissingRequiredInputError, NotifyError
from notify_mm.mattermost import MattermostNotifier
from notify_mm.resolver import resolve_payload

logger = logging.getLogger(__name__)

REQUIRED_INPUTS = ("mattermost_webhook_url", "github_context")


@dataclass(frozen=True)
class RunResult:
    """Outcome of one run; the caller decides how to report it."""

    ok: bool
    message: str


def load_settings() -> Settings:
    """Read settings from the environment, naming any missing input."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        fields = [str(err["loc"][0]) for err in exc.errors() if err["loc"]]
        missing = [name.upper() for name in fields if name in REQUIRED_INPUTS]
        if missing:
            raise MissingRequiredInputError(missing) from exc
        raise ConfigurationError(str(exc)) from exc


async def run(settings: Settings, notifier: Notifier | None = None) -> RunResult:
    """Resolve the payload and deliver it."""
    if notifier is None:
        notifier = MattermostNotifier(settings.mattermost_webhook_url)

    try:
        payload = resolve_payload(settings)
        logger.debug("%s", payload.describe())
        await notifier.send(payload)
    except NotifyError as exc:
        return RunResult(ok=False, message=str(exc))
    except httpx.HTTPError as exc:
        return RunResult(ok=False, message=f"{type(exc).__name__}: {exc}")

    return RunResult(ok=True, message="Successfully sent notification!")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if logging.getLogger().getEffectiveLevel() > logging.DEBUG:
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)


def _fail(message: str, annotate: bool) -> NoReturn:
    logger.error("%s", message)
    if annotate:
        print(f"::error::{message}")
    sys.exit(1)


def main() -> None:
    """Entry point for the notify-mm command."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _configure_logging("INFO")
        _fail(str(exc), annotate=os.environ.get("GITHUB_ACTIONS") == "true")

    _configure_logging("DEBUG" if settings.runner_debug else settings.log_level.upper())

    result = asyncio.run(run(settings))
    if not result.ok:
        _fail(result.message, annotate=settings.github_actions)
