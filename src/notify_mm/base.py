"""Abstract notifier interface."""

from abc import ABC, abstractmethod

from notify_mm.payload import Payload


class Notifier(ABC):
    """Base class for notification backends."""

    @abstractmethod
    async def send(self, payload: Payload) -> None:
        """Deliver the payload, raising on any failure."""
