"""Command-line entry point: list a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import typing as typ

from ghactivity.github import ActivityError, UsageError, fetch_events
from ghactivity.logging import (
    DEFAULT_LOG_LEVEL,
    configure_logging,
    get_logger,
    log_debug,
    log_warning,
)
from ghactivity.render import render_events

if typ.TYPE_CHECKING:
    import httpx

logger = get_logger(__name__)

PROG = "gh-activity"
USAGE = f"Usage: {PROG} <username>"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=__doc__,
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "usernames",
        nargs="*",
        metavar="username",
        help="GitHub login whose public activity is listed",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help=f"Diagnostic log level written to stderr (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def _parse_arguments(
    parser: argparse.ArgumentParser, argv: list[str] | None
) -> argparse.Namespace:
    """Parse ``argv``, raising :class:`UsageError` unless it names one user.

    Unrecognised options (including ``-h``) are usage errors rather than
    usernames.
    """
    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as exc:
        raise UsageError(str(exc)) from exc
    if unknown:
        raise UsageError.unknown_options(unknown)
    if len(args.usernames) != 1:
        raise UsageError.wrong_arity(len(args.usernames))
    return args


def main(
    argv: list[str] | None = None,
    *,
    http_client: httpx.Client | None = None,
) -> int:
    """Fetch and print the recent public activity of one GitHub user.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    http_client : httpx.Client | None, optional
        HTTP client to send the request with. ``None`` creates one for the
        duration of the call.

    Returns
    -------
    int
        Exit code: 0 on success, 1 on a usage error or a failed fetch.

    """
    try:
        args = _parse_arguments(_build_parser(), argv)
    except UsageError as exc:
        log_debug(logger, "Usage error: %s", exc)
        print(USAGE)
        return 1

    normalized_level, invalid_level = configure_logging(args.log_level, force=True)
    if invalid_level:
        log_warning(
            logger,
            "Invalid --log-level %r, falling back to %s",
            args.log_level,
            normalized_level,
        )
    (username,) = args.usernames

    try:
        events = fetch_events(username, http_client=http_client)
    except ActivityError as exc:
        print(f"Error: {exc}")
        return 1

    render_events(events)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
