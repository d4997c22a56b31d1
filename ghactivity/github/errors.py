"""Errors raised while fetching and decoding GitHub activity."""

from __future__ import annotations


class ActivityError(RuntimeError):
    """Base exception for all activity client errors.

    This provides a single catch point for the command-line entry point.
    """


class UsageError(ActivityError):
    """Raised when the command line does not name exactly one user."""

    @classmethod
    def wrong_arity(cls, count: int) -> UsageError:
        """Return an error for an unexpected number of positional arguments."""
        return cls(f"expected exactly one username, got {count} arguments")

    @classmethod
    def unknown_options(cls, options: list[str]) -> UsageError:
        """Return an error for options the command does not accept."""
        return cls(f"unrecognised options: {' '.join(options)}")

    @classmethod
    def blank_username(cls) -> UsageError:
        """Return an error when the username is empty."""
        return cls("username must be non-empty")


class NotFoundError(ActivityError):
    """Raised when GitHub reports that the user does not exist."""

    def __init__(self, message: str, *, username: str) -> None:
        """Initialise with a message and the username that was looked up."""
        self.username = username
        super().__init__(message)

    @classmethod
    def user(cls, username: str) -> NotFoundError:
        """Return an error for a 404 response."""
        return cls(f"user '{username}' not found", username=username)


class HTTPStatusError(ActivityError):
    """Raised when GitHub returns a non-success status other than 404."""

    def __init__(self, message: str, *, status_code: int) -> None:
        """Initialise with a message and the HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def unexpected_status(cls, status_code: int) -> HTTPStatusError:
        """Return an error for a non-200 response."""
        return cls(
            f"API request failed with status code: {status_code}",
            status_code=status_code,
        )


class NetworkError(ActivityError):
    """Raised when the request cannot be delivered (DNS, connect, timeout)."""

    @classmethod
    def request_failed(cls, detail: str) -> NetworkError:
        """Return an error wrapping a transport failure."""
        return cls(f"error fetching data: {detail}")

    @classmethod
    def timed_out(cls, timeout_s: float) -> NetworkError:
        """Return an error when the whole exchange exceeds its time budget."""
        return cls.request_failed(f"request exceeded {timeout_s:g}s timeout")

    @classmethod
    def invalid_request(cls, detail: str) -> NetworkError:
        """Return an error when the request cannot be built (e.g. bad URL)."""
        return cls(f"error creating request: {detail}")


class BodyReadError(ActivityError):
    """Raised when the response body cannot be read."""

    @classmethod
    def read_failed(cls, detail: str) -> BodyReadError:
        """Return an error wrapping a body read failure."""
        return cls(f"error reading response: {detail}")


class ParseError(ActivityError):
    """Raised when the response body is not a JSON array of event objects."""

    @classmethod
    def invalid_json(cls, detail: str) -> ParseError:
        """Return an error wrapping a decode or validation failure."""
        return cls(f"error parsing JSON: {detail}")
