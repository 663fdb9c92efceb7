"""Notification bodies for GitHub events."""

from __future__ import annotations

from typing import Any

from notify_mm.context import Commit, EventContext
from notify_mm.payload import JsonPayload

USERNAME = "github-notification"
ICON_URL = "https://www.iconfinder.com/icons/8725846/download/png/48"
PUSH_COLOR = "#483d8b"

# Rendered in place of a field the context did not carry.
MISSING = "undefined"


def _field(value: Any) -> str:
    return MISSING if value is None else str(value)


def _link(label: str, url: str) -> str:
    return f"[{label}]({url})"


def wrap(text: str, color: str) -> JsonPayload:
    """Wrap *text* in a single coloured attachment."""
    return JsonPayload(
        {
            "username": USERNAME,
            "icon_url": ICON_URL,
            "attachments": [{"text": text, "color": color}],
        }
    )


def _commit_line(commit: Commit) -> str:
    short_sha = MISSING if commit.id is None else str(commit.id)[:7]
    sha = _link(short_sha, _field(commit.url))
    return f"  - {sha} : {_field(commit.message)} - {_field(commit.author.name)}\n"


def format_push(ctx: EventContext) -> JsonPayload:
    """Summarise a push: who pushed where, plus one line per commit."""
    server_url = _field(ctx.server_url)
    repository = _field(ctx.repository)
    ref_name = _field(ctx.ref_name)
    before = _field(ctx.event.before)
    after = _field(ctx.event.after)

    base_url = f"{server_url}/{repository}"
    branch = _link(ref_name, f"{base_url}/tree/{ref_name}")
    repo = _link(repository, base_url)
    diff = _link("View Changes", f"{base_url}/compare/{before}...{after}")

    header = f"- Pushed by **{_field(ctx.triggering_actor)}** @ {branch} ( {repo} )\n"
    text = header + f"- Commits ( {diff} )\n"
    text += "".join(_commit_line(commit) for commit in ctx.event.commits)

    return wrap(text, PUSH_COLOR)
