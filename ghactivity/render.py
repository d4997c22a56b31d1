"""Render GitHub activity events as a plain-text list."""

from __future__ import annotations

import sys
import typing as typ

from ghactivity.github.models import (
    CreatePayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    WatchPayload,
)
from ghactivity.logging import get_logger, log_debug

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghactivity.github.models import Event

logger = get_logger(__name__)

EMPTY_ACTIVITY_MESSAGE = "No recent activity found."


def capitalize(value: str) -> str:
    """Uppercase the first character of ``value`` and keep the rest as is.

    Unlike :meth:`str.capitalize`, the remainder is not lowercased.

    Examples
    --------
    >>> capitalize("reopened")
    'Reopened'
    >>> capitalize("")
    ''

    """
    if not value:
        return value
    return value[0].upper() + value[1:]


def format_event(event: Event) -> str:
    """Return the single display line for ``event``."""
    repo_name = event.repo.name
    match event.payload:
        case PushPayload(size=size):
            return f"- Pushed {size} commits to {repo_name}"
        case CreatePayload():
            return f"- Created repository {repo_name}"
        case IssuesPayload(action=action, issue=issue):
            return f"- {capitalize(action)} issue in {repo_name}: {issue.title}"
        case PullRequestPayload(action=action, pull_request=pull_request):
            return (
                f"- {capitalize(action)} pull request in {repo_name}: "
                f"{pull_request.title}"
            )
        case WatchPayload():
            return f"- Starred {repo_name}"
        case _:
            log_debug(logger, "No dedicated format for %s", event.type)
            return f"- {event.type} event in {repo_name}"


def format_events(events: cabc.Sequence[Event]) -> list[str]:
    """Return display lines for ``events`` in input order."""
    if not events:
        return [EMPTY_ACTIVITY_MESSAGE]
    return [format_event(event) for event in events]


def render_events(
    events: cabc.Sequence[Event], *, out: typ.TextIO | None = None
) -> None:
    """Print one line per event, or the empty-activity notice.

    Parameters
    ----------
    events : Sequence[Event]
        Events in the order they should be listed.
    out : TextIO | None, optional
        Stream to write to. ``None`` writes to standard output.

    """
    stream = sys.stdout if out is None else out
    for line in format_events(events):
        print(line, file=stream)
