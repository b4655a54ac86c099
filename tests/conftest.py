"""Shared pytest fixtures."""

from collections.abc import Callable

import pytest

from tagbase import (
    MemoryOptionStore,
    Settings,
    StaticTagSource,
    Tag,
    TagBaseRewriter,
)


class RecordingHost:
    """Host double that records deferred callbacks, flushes and redirects."""

    def __init__(self) -> None:
        self.deferred: list[Callable[[], None]] = []
        self.flushes = 0
        self.redirects: list[tuple[str, int]] = []

    def defer(self, callback: Callable[[], None]) -> None:
        self.deferred.append(callback)

    def flush_rewrite_rules(self) -> None:
        self.flushes += 1

    def redirect(self, location: str, status: int) -> None:
        self.redirects.append((location, status))

    def shutdown(self) -> None:
        """Run deferred callbacks, as the host does at end of request."""
        callbacks, self.deferred = self.deferred, []
        for callback in callbacks:
            callback()


@pytest.fixture
def options() -> MemoryOptionStore:
    """Create a fresh option store with a home URL for each test."""
    return MemoryOptionStore({"home": "http://example.com"})


@pytest.fixture
def tag_source() -> StaticTagSource:
    """Create a tag source with two tags, one of them empty."""
    return StaticTagSource([Tag("news", "News", 3), Tag("events", "Events", 0)])


@pytest.fixture
def host() -> RecordingHost:
    """Create a recording host."""
    return RecordingHost()


@pytest.fixture
def settings() -> Settings:
    """Create settings isolated from the environment's .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def rewriter(
    options: MemoryOptionStore,
    tag_source: StaticTagSource,
    host: RecordingHost,
    settings: Settings,
) -> TagBaseRewriter:
    """Create a rewriter wired to in-memory collaborators."""
    return TagBaseRewriter(options, tag_source, host, settings=settings)
