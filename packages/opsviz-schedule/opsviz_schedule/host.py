"""Timer hosts: the "call after a duration" facility timers run on."""
from __future__ import annotations

import heapq
from typing import Callable, Protocol


class TimerHandle:
    """Cancelable reference to one pending callback."""

    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class TimerHost(Protocol):
    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class VirtualTimerHost:
    """Heap-ordered timer queue on a virtual clock.

    Time only moves through ``advance``; callbacks due inside the advanced
    window run in due order with ``now()`` set to their due time.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._counter = 0

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        if delay < 0:
            raise ValueError("delay must not be negative")
        handle = TimerHandle(self._now + delay, callback)
        heapq.heappush(self._queue, (handle.due, self._counter, handle))
        self._counter += 1
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> int:
        """Move time forward, running due callbacks. Returns how many ran."""
        if seconds < 0:
            raise ValueError("cannot advance by a negative duration")
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = due
            handle.callback()
            ran += 1
        self._now = target
        return ran
