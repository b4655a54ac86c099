"""Event/handler table standing in for host actions and filters."""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
from typing import Any

from tagbase.types import HookEvent

DEFAULT_PRIORITY = 10


@dataclass(frozen=True, slots=True)
class _Handler:
    priority: int
    order: int
    callback: Callable[..., Any]


@dataclass
class HookTable:
    """Per-instance registry of callbacks keyed by ``HookEvent``.

    Callbacks run in ascending priority, then registration order. Filters
    (``apply``) thread a value through the chain; actions (``fire``) ignore
    return values. Exceptions propagate and stop the chain.
    """

    _handlers: dict[HookEvent, list[_Handler]] = field(
        default_factory=lambda: defaultdict(list)
    )
    _counter: count = field(default_factory=count)

    def add(
        self,
        event: HookEvent,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register a callback for an event."""
        handlers = self._handlers[event]
        handlers.append(_Handler(priority, next(self._counter), callback))
        handlers.sort(key=lambda h: (h.priority, h.order))

    def handlers(self, event: HookEvent) -> list[Callable[..., Any]]:
        """Callbacks for an event, in run order."""
        return [h.callback for h in self._handlers.get(event, [])]

    def apply(self, event: HookEvent, value: Any, *args: Any) -> Any:
        """Run filters, passing each one the previous return value."""
        for callback in self.handlers(event):
            value = callback(value, *args)
        return value

    def fire(self, event: HookEvent, *args: Any) -> None:
        """Run actions."""
        for callback in self.handlers(event):
            callback(*args)
