"""Shared fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from notify_mm.config import Settings

WEBHOOK_URL = "https://mm.example.com/hooks/abc"

ENV_VARS = (
    "MATTERMOST_WEBHOOK_URL",
    "MATTERMOST_CHANNEL",
    "MATTERMOST_USERNAME",
    "MATTERMOST_ICON_URL",
    "TEXT",
    "PAYLOAD",
    "PAYLOAD_FILENAME",
    "GITHUB_CONTEXT",
    "PAYLOAD_BASE_DIR",
    "LOG_LEVEL",
    "RUNNER_DEBUG",
    "GITHUB_ACTIONS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's own environment out of Settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def push_context() -> dict[str, Any]:
    return {
        "event_name": "push",
        "triggering_actor": "alice",
        "server_url": "https://github.com",
        "repository": "o/r",
        "ref_name": "main",
        "token": "***",
        "event": {
            "before": "aaa1111111111111111111111111111111111111",
            "after": "bbb2222222222222222222222222222222222222",
            "commits": [
                {
                    "id": "abc1234567",
                    "message": "fix",
                    "url": "https://github.com/o/r/commit/abc1234567",
                    "author": {"name": "alice", "email": "alice@example.com"},
                },
            ],
        },
    }


@pytest.fixture()
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    """Build Settings with sensible defaults for a non-push event."""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "mattermost_webhook_url": WEBHOOK_URL,
            "github_context": json.dumps({"event_name": "workflow_dispatch"}),
            "payload_base_dir": tmp_path,
        }
        values.update(overrides)
        return Settings(**values)

    return _make
