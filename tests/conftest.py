"""Shared fixtures."""

import time

import pytest


@pytest.fixture
def local_timezone(monkeypatch):
    """Switch the process timezone for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("needs time.tzset")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
