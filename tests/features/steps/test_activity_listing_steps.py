"""Behavioural tests for the activity listing command."""

from __future__ import annotations

import typing as typ

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from ghactivity.cli import USAGE, main
from tests.helpers.feed_events import (
    RecordedFeed,
    issues_event,
    other_event,
    push_event,
)

scenarios("../activity_listing.feature")


class ActivityContext(typ.TypedDict, total=False):
    """Shared state used by BDD steps."""

    feed: RecordedFeed
    exit_code: int
    output: str


@pytest.fixture
def activity_context() -> ActivityContext:
    """Provide a fresh fake feed for each scenario."""
    return ActivityContext(feed=RecordedFeed())


@given(
    parsers.parse(
        'the events feed for "{username}" contains a push of {size:d} commits '
        'to "{repo}"'
    )
)
def given_push(
    activity_context: ActivityContext, username: str, size: int, repo: str
) -> None:
    """Serve a single push event."""
    del username
    activity_context["feed"].body = [push_event(repo=repo, size=size)]


@given(
    parsers.parse(
        'the events feed for "{username}" contains an issue "{title}" '
        'opened in "{repo}"'
    )
)
def given_issue(
    activity_context: ActivityContext, username: str, title: str, repo: str
) -> None:
    """Serve a single opened issue event."""
    del username
    activity_context["feed"].body = [
        issues_event(action="opened", title=title, repo=repo)
    ]


@given(
    parsers.parse(
        'the events feed for "{username}" contains a "{event_type}" in "{repo}"'
    )
)
def given_other_event(
    activity_context: ActivityContext, username: str, event_type: str, repo: str
) -> None:
    """Serve a single event of an arbitrary type."""
    del username
    activity_context["feed"].body = [other_event(event_type, repo=repo)]


@given(parsers.parse('the events feed for "{username}" is empty'))
def given_empty_feed(activity_context: ActivityContext, username: str) -> None:
    """Serve an empty array."""
    del username
    activity_context["feed"].body = []


@given(parsers.parse("the events feed responds with status {status_code:d}"))
def given_status(activity_context: ActivityContext, status_code: int) -> None:
    """Serve an error status."""
    activity_context["feed"].status_code = status_code
    activity_context["feed"].body = {"message": "error"}


def _run(
    activity_context: ActivityContext,
    argv: list[str],
    capsys: pytest.CaptureFixture[str],
) -> None:
    with activity_context["feed"].client() as http_client:
        activity_context["exit_code"] = main(argv, http_client=http_client)
    activity_context["output"] = capsys.readouterr().out


@when(parsers.parse('I run the activity command for "{username}"'))
def when_run_for_user(
    activity_context: ActivityContext,
    capsys: pytest.CaptureFixture[str],
    username: str,
) -> None:
    """Run the CLI for one user."""
    _run(activity_context, [username], capsys)


@when("I run the activity command without arguments")
def when_run_without_arguments(
    activity_context: ActivityContext, capsys: pytest.CaptureFixture[str]
) -> None:
    """Run the CLI with no username."""
    _run(activity_context, [], capsys)


@then(parsers.parse("the command exits with status {code:d}"))
def then_exit_code(activity_context: ActivityContext, code: int) -> None:
    """Check the exit status."""
    assert activity_context["exit_code"] == code


@then(parsers.parse('the output is exactly "{expected}"'))
def then_output_exact(activity_context: ActivityContext, expected: str) -> None:
    """Check the full standard output."""
    assert activity_context["output"] == f"{expected}\n"


@then(parsers.parse('the output contains "{fragment}"'))
def then_output_contains(activity_context: ActivityContext, fragment: str) -> None:
    """Check standard output includes a fragment."""
    assert fragment in activity_context["output"]


@then("no request was sent")
def then_no_request(activity_context: ActivityContext) -> None:
    """Check the feed was never contacted."""
    assert activity_context["feed"].requests == []


@then("the output is the usage message")
def then_output_usage(activity_context: ActivityContext) -> None:
    """Check only the usage line was printed."""
    assert activity_context["output"] == f"{USAGE}\n"
