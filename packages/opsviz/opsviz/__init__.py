"""opsviz - Frame-driven animation engine for an operations console."""

from opsviz.arena import VisualArena
from opsviz.clock import ClockSource
from opsviz.config import ConsoleConfig
from opsviz.scene import AnimatedEntity, MotionRule, Scene
from opsviz.scheduler import FrameScheduler, FrameSubscription
from opsviz.state import DerivedState, VisualState
from opsviz.types import (
    DeadEntityError,
    EntityId,
    FrameContext,
    SchedulerClosedError,
    SnapshotError,
)

__all__ = [
    "Scene",
    "AnimatedEntity",
    "MotionRule",
    "FrameScheduler",
    "FrameSubscription",
    "ClockSource",
    "VisualArena",
    "VisualState",
    "DerivedState",
    "ConsoleConfig",
    "FrameContext",
    "EntityId",
    "DeadEntityError",
    "SchedulerClosedError",
    "SnapshotError",
]
