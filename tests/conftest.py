"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

import os
from typing import Any

import pytest

from core.config import ApiEntry, Settings
from core.logging import configure_logging
from services.market.registry import InMemoryMarketHost


class RecordingSession:
    """Session that records sent messages, optionally failing on send."""

    def __init__(self, *, fail: bool = False) -> None:
        """Initialize the session."""
        self.sent: list[str] = []
        self.fail = fail

    async def send(self, content: str) -> list[str]:
        """Record the message or raise when configured to fail."""
        if self.fail:
            msg = "channel closed"
            raise RuntimeError(msg)
        self.sent.append(content)
        return ["1"]


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Send log output to stderr so stdout only carries command output."""
    configure_logging(log_level="INFO")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PICMARKET_* variables from the outer environment out of tests."""
    for key in list(os.environ.keys()):
        if key.startswith("PICMARKET_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def sunset_entry() -> ApiEntry:
    """Return an entry extracting the image URL with a JSONPath."""
    return ApiEntry(
        name="Sunset",
        description="A random sunset",
        tags=["pic", "sunset"],
        url="https://x/api",
        method="GET",
        response="$.data.url",
    )


@pytest.fixture()
def direct_entry() -> ApiEntry:
    """Return an entry whose URL is the image itself."""
    return ApiEntry(
        name="Direct",
        description="Direct image",
        tags=["pic"],
        url="https://img/2.png",
        response="",
    )


@pytest.fixture()
def settings(sunset_entry: ApiEntry, direct_entry: ApiEntry) -> Settings:
    """Return settings with both example entries."""
    return Settings(api_list=[sunset_entry, direct_entry])


@pytest.fixture()
def host() -> InMemoryMarketHost:
    """Return an empty in-memory market host."""
    return InMemoryMarketHost()


@pytest.fixture()
def session() -> RecordingSession:
    """Return a session recording sent messages."""
    return RecordingSession()


def entry_data(**overrides: Any) -> dict[str, Any]:
    """Build raw entry data with sensible defaults."""
    data: dict[str, Any] = {
        "name": "Cat",
        "description": "A cat picture",
        "tags": ["cat"],
        "url": "https://api.example.com/cat",
        "method": "GET",
        "response": "$[0].url",
    }
    data.update(overrides)
    return data


@pytest.fixture()
def make_session() -> type[RecordingSession]:
    """Return the recording session class for tests needing custom sessions."""
    return RecordingSession


@pytest.fixture()
def make_entry() -> Any:
    """Return a factory building ApiEntry instances from overrides."""

    def factory(**overrides: Any) -> ApiEntry:
        return ApiEntry(**entry_data(**overrides))

    return factory
