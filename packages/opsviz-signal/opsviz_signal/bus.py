"""In-memory event bus flushed once per frame."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


class EventSubscription:
    """Handle returned by ``EventBus.subscribe``; ``cancel()`` unsubscribes."""

    __slots__ = ("_bus", "event_name", "handler")

    def __init__(self, bus: EventBus, event_name: str, handler: _Handler) -> None:
        self._bus = bus
        self.event_name = event_name
        self.handler = handler

    def cancel(self) -> None:
        self._bus.unsubscribe(self.event_name, self.handler)


class EventBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, event_name: str, handler: _Handler) -> EventSubscription:
        self._subscribers.setdefault(event_name, []).append(handler)
        return EventSubscription(self, event_name, handler)

    def unsubscribe(self, event_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, event_name: str, **data: Any) -> None:
        self._queue.append((event_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        # Events published by handlers wait for the next flush.
        snapshot = self._queue
        self._queue = []
        for event_name, data in snapshot:
            for handler in list(self._subscribers.get(event_name, [])):
                handler(event_name, data)

    def clear(self) -> None:
        self._queue.clear()
