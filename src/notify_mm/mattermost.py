"""Mattermost webhook notifier."""

import logging

import httpx

from notify_mm.base import Notifier
from notify_mm.errors import DeliveryError
from notify_mm.payload import Payload

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class MattermostNotifier(Notifier):
    """Send notifications via a Mattermost incoming webhook."""

    def __init__(self, webhook_url: str) -> None:
        self.webhook_url = webhook_url

    async def send(self, payload: Payload) -> None:
        """Post the payload once; anything but 200 is a failure."""
        async with httpx.AsyncClient() as client:
            resp = await client.post(
                self.webhook_url, content=payload.body(), headers=HEADERS
            )

        if resp.status_code != 200:
            logger.error("Unexpected status code: %s", resp.status_code)
            raise DeliveryError(resp.status_code, resp.reason_phrase)

        logger.info("Successfully sent notification!")
