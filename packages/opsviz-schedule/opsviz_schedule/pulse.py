"""PulseTimer - randomized idle/pulsing state machine."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from opsviz_schedule.host import TimerHandle, TimerHost

if TYPE_CHECKING:
    from opsviz_signal import EventBus

logger = logging.getLogger(__name__)

IDLE = "idle"
PULSING = "pulsing"


class RandomSource(Protocol):
    def random(self) -> float: ...


class PulseTimer:
    """Toggles a pulse flag on a jittered schedule.

    Fires ``base_interval + U(0, jitter)`` seconds after start and after
    every previous fire (the delay is redrawn each cycle), stays
    ``pulsing`` for ``duration`` seconds, then returns to ``idle``.
    Runs until stopped.
    """

    def __init__(
        self,
        host: TimerHost,
        rng: RandomSource,
        base_interval: float = 2.0,
        jitter: float = 1.0,
        duration: float = 0.5,
        bus: EventBus | None = None,
        name: str = "pulse",
    ) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        if jitter < 0:
            raise ValueError("jitter must not be negative")
        if base_interval <= duration:
            raise ValueError("base_interval must exceed duration")
        self._host = host
        self._rng = rng
        self.base_interval = base_interval
        self.jitter = jitter
        self.duration = duration
        self._bus = bus
        self.name = name
        self.state = IDLE
        self.changed_at = host.now()
        self.pulses = 0
        self._next_fire: TimerHandle | None = None
        self._end_pulse: TimerHandle | None = None

    @property
    def pulsing(self) -> bool:
        return self.state == PULSING

    @property
    def running(self) -> bool:
        return self._next_fire is not None

    def next_interval(self) -> float:
        return self.base_interval + self._rng.random() * self.jitter

    def start(self) -> None:
        if self._next_fire is None:
            self._next_fire = self._host.call_later(self.next_interval(), self._fire)

    def stop(self) -> None:
        for handle in (self._next_fire, self._end_pulse):
            if handle is not None:
                handle.cancel()
        self._next_fire = None
        self._end_pulse = None
        if self.state != IDLE:
            self._transition(IDLE)

    def _transition(self, state: str) -> None:
        self.state = state
        self.changed_at = self._host.now()
        logger.debug("%s -> %s at %.3f", self.name, state, self.changed_at)
        if self._bus is not None:
            self._bus.publish(f"{self.name}_{state}", at=self.changed_at)

    def _fire(self) -> None:
        self.pulses += 1
        self._transition(PULSING)
        self._end_pulse = self._host.call_later(self.duration, self._end)
        self._next_fire = self._host.call_later(self.next_interval(), self._fire)

    def _end(self) -> None:
        self._end_pulse = None
        self._transition(IDLE)
