"""opsviz-schedule - Independent timers and pulse state machines."""
from __future__ import annotations

from opsviz_schedule.host import TimerHandle, TimerHost, VirtualTimerHost
from opsviz_schedule.pulse import IDLE, PULSING, PulseTimer
from opsviz_schedule.timers import Countdown, OneShot, RepeatingTimer

__all__ = [
    "TimerHandle",
    "TimerHost",
    "VirtualTimerHost",
    "RepeatingTimer",
    "OneShot",
    "Countdown",
    "PulseTimer",
    "IDLE",
    "PULSING",
]
