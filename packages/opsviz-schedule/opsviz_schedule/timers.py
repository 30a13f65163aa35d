"""Repeating, one-shot, and countdown timers on a TimerHost."""
from __future__ import annotations

from typing import Callable

from opsviz_schedule.host import TimerHandle, TimerHost


class RepeatingTimer:
    """Fires ``callback`` every ``interval`` seconds until stopped."""

    def __init__(self, host: TimerHost, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._host = host
        self.interval = interval
        self._callback = callback
        self._handle: TimerHandle | None = None
        self.fired = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._handle is None:
            self._handle = self._host.call_later(self.interval, self._fire)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = self._host.call_later(self.interval, self._fire)
        self.fired += 1
        self._callback()


class OneShot:
    """Fires ``callback`` once, ``delay`` seconds after start."""

    def __init__(self, host: TimerHost, delay: float, callback: Callable[[], None]) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._host = host
        self.delay = delay
        self._callback = callback
        self._handle: TimerHandle | None = None
        self.done = False

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._handle is None:
            self.done = False
            self._handle = self._host.call_later(self.delay, self._fire)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self.done = True
        self._callback()


class Countdown:
    """Counts ``start`` down to 1, one step per ``interval``, then finishes.

    ``on_step`` receives each displayed value, starting with ``start``;
    ``on_done`` runs one interval after the value 1 was shown.
    """

    def __init__(
        self,
        host: TimerHost,
        start: int,
        on_done: Callable[[], None],
        on_step: Callable[[int], None] | None = None,
        interval: float = 1.0,
    ) -> None:
        if start < 1:
            raise ValueError("start must be at least 1")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._host = host
        self._start_value = start
        self.interval = interval
        self._on_done = on_done
        self._on_step = on_step
        self._handle: TimerHandle | None = None
        self.remaining: int | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._handle is not None:
            return
        self.remaining = self._start_value
        if self._on_step is not None:
            self._on_step(self.remaining)
        self._handle = self._host.call_later(self.interval, self._fire)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self.remaining = None

    def _fire(self) -> None:
        if self.remaining is None:
            return
        if self.remaining <= 1:
            self._handle = None
            self.remaining = None
            self._on_done()
            return
        self.remaining -= 1
        self._handle = self._host.call_later(self.interval, self._fire)
        if self._on_step is not None:
            self._on_step(self.remaining)
