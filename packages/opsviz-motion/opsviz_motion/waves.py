"""Wave and easing helpers shared by motion rules."""
from __future__ import annotations

import math
from typing import Callable


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def unit_wave(t: float, freq: float = 1.0, phase: float = 0.0) -> float:
    """Sine mapped onto [0, 1]."""
    return (math.sin(t * freq + phase) + 1) / 2


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def ease_between(
    a: float, b: float, elapsed: float, duration: float, easing: str = "ease_in_out"
) -> float:
    """Interpolate from ``a`` to ``b`` over ``duration`` seconds."""
    if duration <= 0:
        return b
    progress = min(max(elapsed / duration, 0.0), 1.0)
    return lerp(a, b, EASINGS[easing](progress))
