"""Motion rules: pure functions of elapsed time.

Every rule is a frozen dataclass whose ``state(t)`` depends on nothing but
``t`` and its own parameters, so an entity can be evaluated at any moment
in any order and rewound by passing an earlier ``t``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from opsviz import DerivedState, MotionRule

from opsviz_motion.waves import lerp, unit_wave

_PULSE_CHANNELS = ("intensity", "opacity", "scale")


@dataclass(frozen=True)
class Static:
    """Drives nothing; the record keeps its construction values."""

    def state(self, t: float) -> DerivedState:
        return DerivedState()


@dataclass(frozen=True)
class Spin:
    """Unbounded rotation at a constant angular velocity (rad/s).

    ``channel`` is ``"angle"`` for in-plane rotation or ``"heading"`` for
    turning about the vertical axis.
    """

    angular_velocity: float
    base_angle: float = 0.0
    channel: str = "angle"

    def __post_init__(self) -> None:
        if self.channel not in ("angle", "heading"):
            raise ValueError("Spin channel must be 'angle' or 'heading'")

    def state(self, t: float) -> DerivedState:
        return DerivedState(**{self.channel: self.base_angle + t * self.angular_velocity})


@dataclass(frozen=True)
class Swing:
    """Joint rotation oscillating between ``low`` and ``high``."""

    low: float
    high: float
    freq: float = 1.0
    phase: float = 0.0

    def state(self, t: float) -> DerivedState:
        angle = lerp(self.low, self.high, unit_wave(t, self.freq, self.phase))
        # Rounding in lerp can land one ulp outside the limits.
        return DerivedState(angle=min(max(angle, self.low), self.high))


@dataclass(frozen=True)
class Pulse:
    """``base + sin(t * freq + phase) * amplitude`` on one channel."""

    base: float
    amplitude: float
    freq: float = 1.0
    phase: float = 0.0
    channel: str = "intensity"

    def __post_init__(self) -> None:
        if self.channel not in _PULSE_CHANNELS:
            raise ValueError(f"Pulse channel must be one of {_PULSE_CHANNELS}")

    @property
    def low(self) -> float:
        return self.base - abs(self.amplitude)

    @property
    def high(self) -> float:
        return self.base + abs(self.amplitude)

    def state(self, t: float) -> DerivedState:
        value = self.base + math.sin(t * self.freq + self.phase) * self.amplitude
        return DerivedState(**{self.channel: value})


@dataclass(frozen=True)
class Flare:
    """Bistable intensity: ``hot`` while the wave is above ``threshold``."""

    threshold: float
    hot: float
    cool: float
    freq: float = 1.0
    phase: float = 0.0

    def firing(self, t: float) -> bool:
        return math.sin(t * self.freq + self.phase) > self.threshold

    def state(self, t: float) -> DerivedState:
        return DerivedState(intensity=self.hot if self.firing(t) else self.cool)


@dataclass(frozen=True)
class Flicker:
    """Opacity riding ``|sin|`` between ``low`` and ``high``."""

    low: float
    high: float
    freq: float = 1.0
    phase: float = 0.0

    def state(self, t: float) -> DerivedState:
        wave = abs(math.sin(t * self.freq + self.phase))
        return DerivedState(opacity=self.low + wave * (self.high - self.low))


@dataclass(frozen=True)
class Drift:
    """Oscillation on the ground plane, facing the direction of travel.

    Each axis is ``center + sin(t * freq + phase) * amplitude``; heading is
    ``atan2(vx, vz)`` of the analytic velocity.
    """

    center_x: float = 0.0
    center_z: float = 0.0
    amplitude_x: float = 0.0
    amplitude_z: float = 0.0
    freq_x: float = 1.0
    freq_z: float = 1.0
    phase_x: float = 0.0
    phase_z: float = 0.0

    def state(self, t: float) -> DerivedState:
        ax = t * self.freq_x + self.phase_x
        az = t * self.freq_z + self.phase_z
        vx = math.cos(ax) * self.amplitude_x * self.freq_x
        vz = math.cos(az) * self.amplitude_z * self.freq_z
        return DerivedState(
            x=self.center_x + math.sin(ax) * self.amplitude_x,
            z=self.center_z + math.sin(az) * self.amplitude_z,
            heading=math.atan2(vx, vz),
        )


@dataclass(frozen=True)
class Bob:
    """Vertical hover around ``center``."""

    center: float
    amplitude: float
    freq: float = 1.0
    phase: float = 0.0

    def state(self, t: float) -> DerivedState:
        return DerivedState(y=self.center + math.sin(t * self.freq + self.phase) * self.amplitude)


@dataclass(frozen=True)
class GatedBob:
    """Bob only while a slow gate wave is above ``gate_threshold``."""

    rest: float
    amplitude: float
    freq: float
    gate_freq: float
    gate_threshold: float

    def state(self, t: float) -> DerivedState:
        if math.sin(t * self.gate_freq) > self.gate_threshold:
            return DerivedState(y=self.rest + math.sin(t * self.freq) * self.amplitude)
        return DerivedState(y=self.rest)


@dataclass(frozen=True)
class Bank:
    """Aircraft attitude: roll in ``angle``, yaw in ``heading``."""

    roll_amplitude: float
    roll_freq: float
    yaw_base: float
    yaw_amplitude: float
    yaw_freq: float

    def state(self, t: float) -> DerivedState:
        return DerivedState(
            angle=math.sin(t * self.roll_freq) * self.roll_amplitude,
            heading=math.sin(t * self.yaw_freq) * self.yaw_amplitude + self.yaw_base,
        )


class Compose:
    """Merge several rules; later rules win on shared channels."""

    __slots__ = ("rules",)

    def __init__(self, *rules: MotionRule) -> None:
        if not rules:
            raise ValueError("Compose requires at least one rule")
        self.rules = rules

    def state(self, t: float) -> DerivedState:
        merged = DerivedState()
        for rule in self.rules:
            merged = merged.merge(rule.state(t))
        return merged
