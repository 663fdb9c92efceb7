"""Models for the serialized GitHub Actions ``github`` context."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from notify_mm.errors import ParseError


class _Loose(BaseModel):
    """Model that accepts any JSON value, keeping only what it recognises.

    A value that is not an object becomes an empty model, and every leaf
    is left as whatever JSON value was supplied (``None`` when absent).
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _objects_only(cls, data: Any) -> Any:
        return data if isinstance(data, dict) else {}


class CommitAuthor(_Loose):
    """Author of a pushed commit."""

    name: Any = None


class Commit(_Loose):
    """One entry of ``event.commits``."""

    id: Any = None
    message: Any = None
    url: Any = None
    author: CommitAuthor = Field(default_factory=CommitAuthor)


class PushEvent(_Loose):
    """The ``event`` payload fields a push summary needs."""

    before: Any = None
    after: Any = None
    commits: list[Commit] = Field(default_factory=list)

    @field_validator("commits", mode="before")
    @classmethod
    def _list_only(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []


class EventContext(_Loose):
    """Top-level fields of the ``github`` context."""

    event_name: Any = None
    triggering_actor: Any = None
    server_url: Any = None
    repository: Any = None
    ref_name: Any = None
    event: PushEvent = Field(default_factory=PushEvent)


def parse_context(raw: str) -> EventContext:
    """Parse the JSON-encoded ``github`` context.

    Only syntax is checked: fields that are missing or of an unexpected
    shape come through as ``None`` or empty, never as a failure.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(f"GITHUB_CONTEXT is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"GITHUB_CONTEXT must be a JSON object, got {type(data).__name__}"
        )

    return EventContext.model_validate(data)
