"""Synthetic telemetry series generation."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Protocol, Sequence

HOURS_PER_DAY = 24


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True, slots=True)
class TimeSeriesSample:
    label: str
    value: float


def hour_label(i: int) -> str:
    """Hour-of-day label for sample ``i``; later days carry a ``D<n>`` prefix."""
    day, hour = divmod(i, HOURS_PER_DAY)
    if day == 0:
        return f"{hour:02d}:00"
    return f"D{day} {hour:02d}:00"


def envelope(i: int, base: float, variance: float, trend: float) -> float:
    """Deterministic part of sample ``i``: daily sinusoid plus linear drift."""
    return base + math.sin(i / 3) * variance + trend * i


def generate_series(
    count: int = HOURS_PER_DAY,
    base: float = 50.0,
    variance: float = 20.0,
    trend: float = 0.0,
    rng: RandomSource | None = None,
) -> list[TimeSeriesSample]:
    """Generate ``count`` labelled samples around a noisy daily rhythm.

    Each value is ``envelope(i) + U(0, variance / 2)`` clamped at zero.
    ``count <= 0`` yields an empty list.
    """
    if rng is None:
        rng = random.Random()
    samples = []
    for i in range(max(count, 0)):
        noise = rng.random() * variance / 2
        value = max(0.0, envelope(i, base, variance, trend) + noise)
        samples.append(TimeSeriesSample(label=hour_label(i), value=value))
    return samples


def series_bounds(samples: Sequence[TimeSeriesSample]) -> tuple[float, float]:
    if not samples:
        return (0.0, 0.0)
    values = [s.value for s in samples]
    return (min(values), max(values))
