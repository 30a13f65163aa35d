"""System health orb: status palette, radar sweep, and jittered pulse."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from opsviz import FrameContext, FrameScheduler
from opsviz_motion import Pulse, Spin, Static, ease_between
from opsviz_schedule import PulseTimer, TimerHost

from opsviz_scenes.common import AMBER, BLUE, GREEN, RED, new_scene

if TYPE_CHECKING:
    from opsviz_signal import EventBus

STATUS_COLORS: dict[str, str] = {
    "optimal": GREEN,
    "good": BLUE,
    "warning": AMBER,
    "critical": RED,
}

STATUS_TEXT: dict[str, str] = {
    "optimal": "System Optimal",
    "good": "System Good",
    "warning": "System Warning",
    "critical": "System Critical",
}

GLOW_TRANSITION = 0.5
RADAR_PERIOD = 4.0


class HealthOrb:
    """A status orb whose outer glow swells on every pulse.

    The frame-driven parts (radar sweep, breathing core) live in ``scene``;
    the pulse is an independent ``PulseTimer`` attached to the same scene,
    so it starts and stops with it.
    """

    def __init__(
        self,
        host: TimerHost,
        status: str = "good",
        seed: int | None = None,
        scheduler: FrameScheduler | None = None,
        bus: EventBus | None = None,
    ) -> None:
        if status not in STATUS_COLORS:
            raise ValueError(f"Unknown health status {status!r}")
        self.status = status
        self._host = host
        self.scene, rng = new_scene("health", seed, scheduler)
        color = self.color
        still = Static()
        self.glow_id = self.scene.add_entity("orb", still, size=1.0, color=color, opacity=0.2)
        self.core_id = self.scene.add_entity(
            "orb",
            Pulse(0.75, 0.25, freq=math.pi, channel="opacity"),
            size=0.6,
            color=color,
        )
        self.sweep_id = self.scene.add_entity(
            "indicator-light",
            Spin(math.pi * 2 / RADAR_PERIOD),
            size=1.0,
            color=color,
            opacity=0.4,
        )
        self.scene.add_entity("indicator-light", still, size=0.1, color=color, intensity=1.0)
        self.pulse = PulseTimer(host, rng, bus=bus, name="health_pulse")
        self.scene.attach_timer(self.pulse)
        self.scene.add_frame_callback(self._on_frame)

    @property
    def color(self) -> str:
        return STATUS_COLORS[self.status]

    @property
    def text(self) -> str:
        return STATUS_TEXT[self.status]

    def glow(self) -> tuple[float, float]:
        """Current (opacity, scale) of the outer glow, eased across pulses."""
        since = self._host.now() - self.pulse.changed_at
        if self.pulse.pulsing:
            start, end = (0.2, 1.0), (0.3, 1.1)
        else:
            start, end = (0.3, 1.1), (0.2, 1.0)
        if self.pulse.pulses == 0:
            return end
        return (
            ease_between(start[0], end[0], since, GLOW_TRANSITION),
            ease_between(start[1], end[1], since, GLOW_TRANSITION),
        )

    def _on_frame(self, ctx: FrameContext) -> None:
        self.sync_glow()

    def sync_glow(self) -> None:
        """Copy the eased glow into the glow entity's record."""
        opacity, scale = self.glow()
        self.scene.arena.write(self.glow_id, opacity=opacity, scale=scale)
