"""In-memory option store and tag source."""

import threading
from collections.abc import Iterable
from typing import Any

from tagbase.types import Tag


class MemoryOptionStore:
    """Thread-safe dict-backed option store."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._options: dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, name: str) -> Any | None:
        """Get an option value, or None if unset."""
        with self._lock:
            return self._options.get(name)

    def set(self, name: str, value: Any) -> None:
        """Create or update an option."""
        with self._lock:
            self._options[name] = value

    def delete(self, name: str) -> None:
        """Delete an option."""
        with self._lock:
            self._options.pop(name, None)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._options


class StaticTagSource:
    """Tag source over a fixed, mutable list of tags."""

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._tags = list(tags)

    def all_tags(self) -> list[Tag]:
        """Return every tag in insertion order."""
        return list(self._tags)

    def add(self, tag: Tag) -> None:
        """Append a tag."""
        self._tags.append(tag)

    def remove(self, slug: str) -> None:
        """Drop tags with the given slug."""
        self._tags = [tag for tag in self._tags if tag.slug != slug]
