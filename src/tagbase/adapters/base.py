"""Protocols for the host collaborators the rewriter depends on."""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from tagbase.types import Tag


@runtime_checkable
class OptionStore(Protocol):
    """Host option storage shared across requests."""

    def get(self, name: str) -> Any | None:
        """Get an option value, or None if unset."""
        ...

    def set(self, name: str, value: Any) -> None:
        """Create or update an option."""
        ...

    def delete(self, name: str) -> None:
        """Delete an option. Missing options are ignored."""
        ...


@runtime_checkable
class TagSource(Protocol):
    """Enumerates the host's tags."""

    def all_tags(self) -> list[Tag]:
        """Return every tag, including tags with no posts."""
        ...


@runtime_checkable
class Host(Protocol):
    """Request lifecycle, routing and response hooks of the host."""

    def defer(self, callback: Callable[[], None]) -> None:
        """Run a callback at the end of the current request."""
        ...

    def flush_rewrite_rules(self) -> None:
        """Rebuild and persist the host's rewrite rule table."""
        ...

    def redirect(self, location: str, status: int) -> None:
        """Send a redirect response."""
        ...
