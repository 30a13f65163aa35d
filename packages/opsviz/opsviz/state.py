"""Visual state records and per-frame derived state."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator

# Channels a motion rule may drive.
CHANNELS = ("angle", "heading", "x", "y", "z", "intensity", "opacity", "scale")


@dataclass
class VisualState:
    """One arena record: the transform and material a renderer draws."""

    kind: str
    angle: float = 0.0
    heading: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    intensity: float = 0.0
    opacity: float = 1.0
    scale: float = 1.0
    color: str = "#FFFFFF"
    size: float = 1.0
    # Position and heading are relative to this entity, if set.
    parent: int | None = None
    # Connection lines: the two entities the line joins.
    ends: tuple[int, int] | None = None


@dataclass(frozen=True, slots=True)
class DerivedState:
    """Instantaneous values computed from elapsed time.

    A field left as None is not driven by the rule that produced it.
    """

    angle: float | None = None
    heading: float | None = None
    x: float | None = None
    y: float | None = None
    z: float | None = None
    intensity: float | None = None
    opacity: float | None = None
    scale: float | None = None

    def items(self) -> Iterator[tuple[str, float]]:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                yield f.name, value

    def merge(self, other: DerivedState) -> DerivedState:
        """Overlay ``other`` on top of self; other's driven fields win."""
        values = {name: value for name, value in self.items()}
        values.update(other.items())
        return DerivedState(**values)
