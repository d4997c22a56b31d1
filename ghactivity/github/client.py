"""HTTP client for the GitHub public events feed."""

from __future__ import annotations

import dataclasses
import time
import typing as typ

import httpx
import msgspec

from ghactivity.logging import get_logger, log_debug, log_info, log_warning

from .errors import (
    BodyReadError,
    HTTPStatusError,
    NetworkError,
    NotFoundError,
    ParseError,
    UsageError,
)
from .models import Event, WireEvent

logger = get_logger(__name__)

_HTTP_OK = 200
_HTTP_NOT_FOUND = 404


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubEventsConfig:
    """Configuration for the GitHub events feed client."""

    url_template: str = "https://api.github.com/users/{username}/events"
    user_agent: str = "GitHub-Activity-CLI"
    timeout_s: float = 10.0

    def events_url(self, username: str) -> str:
        """Return the feed URL for ``username``."""
        return self.url_template.format(username=username)


def decode_events(body: bytes) -> list[Event]:
    """Decode a response body into events, preserving feed order.

    Raises
    ------
    ParseError
        If the body is not valid JSON, is not an array of objects, or a
        payload has fields of the wrong type.

    """
    try:
        wire_events = msgspec.json.decode(body, type=list[WireEvent])
        return [Event.from_wire(wire) for wire in wire_events]
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        raise ParseError.invalid_json(str(exc)) from exc


class GitHubEventsClient:
    """Fetch a user's recent public events with a single GET request."""

    def __init__(
        self,
        config: GitHubEventsConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client, creating an owned HTTP client if needed."""
        self._config = config or GitHubEventsConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self._config.timeout_s)

    @property
    def config(self) -> GitHubEventsConfig:
        """Read-only access to the client configuration."""
        return self._config

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> typ.Self:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Close owned resources when leaving a ``with`` block."""
        self.close()

    def fetch_events(self, username: str) -> list[Event]:
        """Return the events GitHub lists for ``username``.

        Parameters
        ----------
        username : str
            GitHub login whose public activity is requested.

        Returns
        -------
        list[Event]
            Events in the order the feed supplied them; may be empty.

        Raises
        ------
        UsageError
            If ``username`` is blank.
        NotFoundError
            If GitHub answers 404.
        HTTPStatusError
            If GitHub answers with any other non-200 status.
        NetworkError
            If the request cannot be delivered or times out.
        BodyReadError
            If the response body cannot be read.
        ParseError
            If the body is not a JSON array of event objects.

        """
        if not username.strip():
            raise UsageError.blank_username()

        url = self._config.events_url(username)
        log_debug(logger, "GET %s", url)
        deadline = time.monotonic() + self._config.timeout_s
        try:
            with self._client.stream(
                "GET",
                url,
                headers={"User-Agent": self._config.user_agent},
                timeout=self._config.timeout_s,
            ) as response:
                self._check_status(response, username)
                body = self._read_body(response, deadline)
        except httpx.InvalidURL as exc:
            raise NetworkError.invalid_request(str(exc)) from exc
        except httpx.TransportError as exc:
            log_warning(logger, "Request to %s failed: %s", url, exc)
            raise NetworkError.request_failed(str(exc)) from exc

        events = decode_events(body)
        log_info(logger, "Fetched %d events for %s", len(events), username)
        return events

    def _check_status(self, response: httpx.Response, username: str) -> None:
        """Map non-200 responses onto activity errors."""
        log_info(logger, "GitHub responded %d for %s", response.status_code, username)
        if response.status_code == _HTTP_NOT_FOUND:
            raise NotFoundError.user(username)
        if response.status_code != _HTTP_OK:
            raise HTTPStatusError.unexpected_status(response.status_code)

    def _read_body(self, response: httpx.Response, deadline: float) -> bytes:
        """Read the full response body, giving up once ``deadline`` passes.

        httpx applies ``timeout_s`` to each read separately, so a server that
        trickles bytes would otherwise never time out.
        """
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                if time.monotonic() > deadline:
                    log_warning(logger, "Response body exceeded the time budget")
                    raise NetworkError.timed_out(self._config.timeout_s)
                chunks.append(chunk)
        except (httpx.HTTPError, httpx.StreamError) as exc:
            log_warning(logger, "Reading response body failed: %s", exc)
            raise BodyReadError.read_failed(str(exc)) from exc
        return b"".join(chunks)


def fetch_events(
    username: str,
    *,
    config: GitHubEventsConfig | None = None,
    http_client: httpx.Client | None = None,
) -> list[Event]:
    """Fetch events for ``username`` using a short-lived client."""
    with GitHubEventsClient(config, http_client=http_client) as client:
        return client.fetch_events(username)
