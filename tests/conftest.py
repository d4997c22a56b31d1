"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from tests.helpers.feed_events import RecordedFeed


@pytest.fixture(autouse=True)
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, object]]:
    """Stop the CLI from installing femtologging handlers during tests."""
    calls: list[dict[str, object]] = []

    def fake_basic_config(**kwargs: object) -> None:
        calls.append(kwargs)

    monkeypatch.setattr("ghactivity.logging.basicConfig", fake_basic_config)
    return calls


@pytest.fixture
def feed() -> RecordedFeed:
    """Return a fake events endpoint serving an empty feed."""
    return RecordedFeed()
