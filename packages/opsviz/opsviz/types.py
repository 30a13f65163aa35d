"""Shared type aliases and errors for the animation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class DeadEntityError(KeyError):
    """Raised when reading an entity that is no longer in the arena."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class SnapshotError(Exception):
    """Raised on restore failures (version or scene mismatch)."""


class SchedulerClosedError(RuntimeError):
    """Raised when registering a frame callback on a closed scheduler."""


FrameCallback = Callable[[FrameContext], None]
