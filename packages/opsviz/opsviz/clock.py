"""ClockSource - per-scene monotonic elapsed time."""

import math
from typing import Callable

from opsviz.types import FrameContext


class ClockSource:
    """Elapsed-time source advanced once per rendered frame.

    With no ``time_fn`` the clock is fixed-step: elapsed is
    ``frame_number / fps``. With a ``time_fn`` (e.g. ``time.monotonic``)
    elapsed is measured from the last reset, and forced strictly upward
    when two readings collide.
    """

    def __init__(self, fps: int = 60, time_fn: Callable[[], float] | None = None) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._time_fn = time_fn
        self._frame_number = 0
        self._elapsed = 0.0
        self._last_dt = 0.0
        self._origin = time_fn() if time_fn is not None else 0.0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def realtime(self) -> bool:
        return self._time_fn is not None

    def advance(self) -> float:
        self._frame_number += 1
        if self._time_fn is None:
            elapsed = self._frame_number * self._dt
        else:
            elapsed = self._time_fn() - self._origin
            if elapsed <= self._elapsed:
                elapsed = math.nextafter(self._elapsed, math.inf)
        self._last_dt = elapsed - self._elapsed
        self._elapsed = elapsed
        return elapsed

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._last_dt if self._time_fn is not None else self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self, frame_number: int = 0, elapsed: float | None = None) -> None:
        """Start a fresh timeline, optionally resuming at a saved position."""
        self._frame_number = frame_number
        if elapsed is None:
            elapsed = frame_number * self._dt if self._time_fn is None else 0.0
        self._elapsed = elapsed
        self._last_dt = 0.0
        if self._time_fn is not None:
            self._origin = self._time_fn() - elapsed
