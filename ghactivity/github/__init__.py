"""GitHub events feed client, records and errors."""

from __future__ import annotations

from .client import GitHubEventsClient, GitHubEventsConfig, decode_events, fetch_events
from .errors import (
    ActivityError,
    BodyReadError,
    HTTPStatusError,
    NetworkError,
    NotFoundError,
    ParseError,
    UsageError,
)
from .models import (
    Commit,
    CreatePayload,
    Event,
    IssueRef,
    IssuesPayload,
    Payload,
    PullRequestPayload,
    PullRequestRef,
    PushPayload,
    Repo,
    UnknownPayload,
    WatchPayload,
)

__all__ = [
    "ActivityError",
    "BodyReadError",
    "Commit",
    "CreatePayload",
    "Event",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "HTTPStatusError",
    "IssueRef",
    "IssuesPayload",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "Payload",
    "PullRequestPayload",
    "PullRequestRef",
    "PushPayload",
    "Repo",
    "UnknownPayload",
    "UsageError",
    "WatchPayload",
    "decode_events",
    "fetch_events",
]
