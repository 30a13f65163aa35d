"""Palette and construction helpers shared by scene builders."""
from __future__ import annotations

import math
import os
import random

from opsviz import FrameScheduler, Scene

BLUE = "#00A3FF"
GREEN = "#00E676"
AMBER = "#FFB300"
RED = "#FF3A5E"
WHITE = "#FFFFFF"
STEEL = "#2C3142"
GRAPHITE = "#1A1F2C"
NIGHT = "#141821"

TAU = math.pi * 2


def new_scene(
    name: str, seed: int | None, scheduler: FrameScheduler | None
) -> tuple[Scene, random.Random]:
    """Create a scene and the construction RNG derived from its seed."""
    if seed is None:
        seed = int.from_bytes(os.urandom(8))
    return Scene(name, scheduler=scheduler, seed=seed), random.Random(seed)


def ring(count: int, radius: float) -> list[tuple[float, float]]:
    """Evenly spaced (cos, sin) points on a circle."""
    return [
        (math.cos(i / count * TAU) * radius, math.sin(i / count * TAU) * radius)
        for i in range(count)
    ]
