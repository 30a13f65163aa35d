"""FrameScheduler - per-frame callback loop, pacing, and lifecycle hooks."""

from __future__ import annotations

import logging
import time
from typing import Callable

from opsviz.clock import ClockSource
from opsviz.types import FrameCallback, FrameContext, SchedulerClosedError

logger = logging.getLogger(__name__)


class FrameSubscription:
    """Owned handle for one registered frame callback."""

    __slots__ = ("_scheduler", "callback", "_active")

    def __init__(self, scheduler: FrameScheduler, callback: FrameCallback) -> None:
        self._scheduler = scheduler
        self.callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._scheduler._discard(self)

    def __enter__(self) -> FrameSubscription:
        return self

    def __exit__(self, *exc: object) -> None:
        self.cancel()


class FrameScheduler:
    def __init__(self, clock: ClockSource | None = None) -> None:
        self._clock = clock if clock is not None else ClockSource()
        self._subscriptions: list[FrameSubscription] = []
        self._start_hooks: list[Callable[[FrameContext], None]] = []
        self._stop_hooks: list[Callable[[FrameContext], None]] = []
        self._stop_requested: bool = False
        self._closed: bool = False

    @property
    def clock(self) -> ClockSource:
        return self._clock

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def register(self, callback: FrameCallback) -> FrameSubscription:
        if self._closed:
            raise SchedulerClosedError("Cannot register on a closed scheduler")
        sub = FrameSubscription(self, callback)
        self._subscriptions.append(sub)
        return sub

    def _discard(self, sub: FrameSubscription) -> None:
        try:
            self._subscriptions.remove(sub)
        except ValueError:
            pass

    def on_start(self, hook: Callable[[FrameContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[FrameContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> FrameContext:
        return self._clock.context(self._request_stop)

    def tick(self) -> None:
        """Advance the clock once and invoke every live callback once.

        A stop request never cuts a tick short; it only ends the
        ``run``/``run_forever`` loop.
        """
        if self._closed:
            return
        self._clock.advance()
        ctx = self._context()
        for sub in list(self._subscriptions):
            if not sub.active:
                continue
            sub.callback(ctx)

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(ctx)

        for _ in range(n):
            self.tick()
            if self._stop_requested or self._closed:
                break

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(ctx)

    def run_forever(self) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(ctx)

        dt = self._clock.dt
        while not self._stop_requested and not self._closed:
            start = time.monotonic()
            self.tick()
            if self._stop_requested:
                break
            # A slow frame delays the next one; missed frames are not replayed.
            sleep_time = dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(ctx)

    def close(self) -> None:
        """Cancel every subscription. Later ticks invoke nothing."""
        if self._closed:
            return
        for sub in list(self._subscriptions):
            sub.cancel()
        self._closed = True
        logger.debug("scheduler closed after %d frames", self._clock.frame_number)
