"""opsviz-motion - Time-driven motion rules for animated entities."""
from __future__ import annotations

from opsviz_motion.rules import (
    Bank,
    Bob,
    Compose,
    Drift,
    Flare,
    Flicker,
    GatedBob,
    Pulse,
    Spin,
    Static,
    Swing,
)
from opsviz_motion.waves import EASINGS, ease_between, lerp, unit_wave

__all__ = [
    "Static",
    "Spin",
    "Swing",
    "Pulse",
    "Flare",
    "Flicker",
    "Drift",
    "Bob",
    "GatedBob",
    "Bank",
    "Compose",
    "EASINGS",
    "ease_between",
    "lerp",
    "unit_wave",
]
