"""Typed records for GitHub public activity events.

Events arrive from the ``/users/{username}/events`` feed as loosely shaped
JSON objects. Each event's ``payload`` is decoded into a narrow struct chosen
by the event's ``type`` tag; tags without a registered struct keep their raw
payload in :class:`UnknownPayload`.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec

AwareDatetime = typ.Annotated[dt.datetime, msgspec.Meta(tz=True)]


class Repo(msgspec.Struct, frozen=True):
    """Repository an event happened in."""

    name: str = ""


class Commit(msgspec.Struct, frozen=True):
    """Commit summary carried by a push."""

    sha: str = ""
    message: str = ""


class IssueRef(msgspec.Struct, frozen=True):
    """Issue fields used when rendering issue events."""

    title: str = ""


class PullRequestRef(msgspec.Struct, frozen=True):
    """Pull request fields used when rendering pull request events."""

    title: str = ""


class PushPayload(msgspec.Struct, frozen=True):
    """Payload of a ``PushEvent``.

    Attributes
    ----------
    push_id : int
        GitHub identifier for the push.
    size : int
        Number of commits in the push.
    commits : tuple[Commit, ...]
        Commit summaries included in the payload.

    """

    push_id: int = 0
    size: int = 0
    commits: tuple[Commit, ...] = ()


class CreatePayload(msgspec.Struct, frozen=True):
    """Payload of a ``CreateEvent``."""

    ref: str | None = None
    ref_type: str = ""


class IssuesPayload(msgspec.Struct, frozen=True):
    """Payload of an ``IssuesEvent``."""

    action: str = ""
    issue: IssueRef = msgspec.field(default_factory=IssueRef)


class PullRequestPayload(msgspec.Struct, frozen=True):
    """Payload of a ``PullRequestEvent``."""

    action: str = ""
    pull_request: PullRequestRef = msgspec.field(default_factory=PullRequestRef)


class WatchPayload(msgspec.Struct, frozen=True):
    """Payload of a ``WatchEvent`` (a star)."""

    action: str = ""


class UnknownPayload(msgspec.Struct, frozen=True):
    """Raw payload of an event type without a dedicated struct."""

    data: dict[str, typ.Any] = msgspec.field(default_factory=dict)


type KnownPayload = (
    PushPayload | CreatePayload | IssuesPayload | PullRequestPayload | WatchPayload
)
type Payload = KnownPayload | UnknownPayload

_PAYLOAD_MODELS: dict[str, type[msgspec.Struct]] = {
    "PushEvent": PushPayload,
    "CreateEvent": CreatePayload,
    "IssuesEvent": IssuesPayload,
    "PullRequestEvent": PullRequestPayload,
    "WatchEvent": WatchPayload,
}


def decode_payload(event_type: str, raw: dict[str, typ.Any] | None) -> Payload:
    """Decode a raw payload object into the struct registered for the tag.

    Parameters
    ----------
    event_type : str
        The event's ``type`` tag.
    raw : dict[str, Any] | None
        The decoded ``payload`` object; ``None`` is treated as empty.

    Returns
    -------
    Payload
        The narrow payload struct, or :class:`UnknownPayload` for
        unregistered tags.

    Raises
    ------
    msgspec.ValidationError
        If a registered payload has fields of the wrong type.

    """
    data = raw or {}
    model = _PAYLOAD_MODELS.get(event_type)
    if model is None:
        return UnknownPayload(data=data)
    return typ.cast("Payload", msgspec.convert(data, type=model))


class WireEvent(msgspec.Struct, frozen=True):
    """Event object as it appears on the wire, before payload decoding."""

    type: str | None = None
    repo: Repo | None = None
    payload: dict[str, typ.Any] | None = None
    created_at: AwareDatetime | None = None


class Event(msgspec.Struct, frozen=True):
    """One activity record from the event feed."""

    type: str
    repo: Repo
    payload: Payload
    created_at: dt.datetime | None = None

    @classmethod
    def from_wire(cls, wire: WireEvent) -> Event:
        """Build an event by decoding the wire payload for its tag."""
        event_type = wire.type or ""
        return cls(
            type=event_type,
            repo=wire.repo or Repo(),
            payload=decode_payload(event_type, wire.payload),
            created_at=wire.created_at,
        )
