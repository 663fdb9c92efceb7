"""Payload values handed from the resolver to a notifier."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RawPayload:
    """Pre-serialized bytes, sent without modification."""

    content: bytes

    def body(self) -> bytes:
        return self.content

    def describe(self) -> str:
        return self.content.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class JsonPayload:
    """Any JSON value, serialized once when it is sent."""

    value: Any

    def body(self) -> bytes:
        return json.dumps(self.value).encode("utf-8")

    def describe(self) -> str:
        return json.dumps(self.value, indent=4)


Payload = RawPayload | JsonPayload
