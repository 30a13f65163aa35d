"""Scene - one mounted visualization with its own clock, arena, and timers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from opsviz.arena import VisualArena
from opsviz.clock import ClockSource
from opsviz.scheduler import FrameScheduler, FrameSubscription
from opsviz.state import DerivedState, VisualState
from opsviz.types import EntityId, FrameCallback, FrameContext, SchedulerClosedError, SnapshotError

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


class MotionRule(Protocol):
    def state(self, t: float) -> DerivedState: ...


class SceneTimer(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


@dataclass(frozen=True, slots=True)
class AnimatedEntity:
    entity_id: EntityId
    kind: str
    rule: MotionRule


class Scene:
    """Owns a set of animated entities and the resources that drive them.

    ``mount()`` registers the per-frame update pass and starts attached
    timers; ``unmount()`` releases all of them and destroys the entities.
    A scene is mounted at most once: a fresh mount means a freshly built
    scene.
    """

    def __init__(
        self,
        name: str,
        scheduler: FrameScheduler | None = None,
        seed: int | None = None,
        fps: int = 60,
    ) -> None:
        self.name = name
        self._owns_scheduler = scheduler is None
        if scheduler is None:
            scheduler = FrameScheduler(ClockSource(fps))
        self._scheduler = scheduler
        self._seed = seed
        self._arena = VisualArena()
        self._entities: list[AnimatedEntity] = []
        self._timers: list[SceneTimer] = []
        self._subscription: FrameSubscription | None = None
        self._callbacks: list[FrameCallback] = []
        self._extra: list[FrameSubscription] = []
        self._origin = 0.0
        self._elapsed = 0.0
        self._unmounted = False

    @property
    def arena(self) -> VisualArena:
        return self._arena

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    @property
    def entities(self) -> tuple[AnimatedEntity, ...]:
        return tuple(self._entities)

    @property
    def mounted(self) -> bool:
        return self._subscription is not None

    @property
    def elapsed(self) -> float:
        """Scene-local time of the last update pass."""
        return self._elapsed

    def add_entity(self, kind: str, rule: MotionRule, **static: Any) -> EntityId:
        record = VisualState(kind=kind, **static)
        eid = self._arena.spawn(record)
        self._entities.append(AnimatedEntity(eid, kind, rule))
        self._arena.apply(eid, rule.state(0.0))
        return eid

    def add_frame_callback(self, callback: FrameCallback) -> None:
        """Run ``callback`` after the update pass while the scene is mounted."""
        self._callbacks.append(callback)
        if self.mounted:
            self._extra.append(self._scheduler.register(callback))

    def attach_timer(self, timer: SceneTimer) -> None:
        self._timers.append(timer)
        if self.mounted:
            timer.start()

    def state_at(self, t: float) -> dict[EntityId, DerivedState]:
        """Evaluate every entity at ``t`` without touching the arena."""
        return {ent.entity_id: ent.rule.state(t) for ent in self._entities}

    def update(self, t: float) -> None:
        self._elapsed = t
        for ent in self._entities:
            self._arena.apply(ent.entity_id, ent.rule.state(t))

    def _on_frame(self, ctx: FrameContext) -> None:
        self.update(ctx.elapsed - self._origin)

    def mount(self) -> None:
        if self.mounted:
            return
        if self._unmounted:
            raise SchedulerClosedError(f"Scene {self.name!r} was already unmounted")
        clock = self._scheduler.clock
        if self._owns_scheduler:
            # Rebase a wall clock without losing a restored position.
            clock.reset(clock.frame_number, clock.elapsed)
        self._origin = clock.elapsed - self._elapsed
        self._subscription = self._scheduler.register(self._on_frame)
        self._extra = [self._scheduler.register(cb) for cb in self._callbacks]
        started: list[SceneTimer] = []
        try:
            for timer in self._timers:
                timer.start()
                started.append(timer)
        except Exception:
            for timer in started:
                timer.stop()
            self._release_subscriptions()
            raise
        logger.debug(
            "mounted scene %s with %d entities and %d timers",
            self.name,
            len(self._entities),
            len(self._timers),
        )

    def unmount(self) -> None:
        if self._unmounted:
            return
        self._unmounted = True
        try:
            self._release_subscriptions()
            for timer in self._timers:
                timer.stop()
        finally:
            if self._owns_scheduler:
                self._scheduler.close()
            self._arena.clear()
            self._entities.clear()
        logger.debug("unmounted scene %s", self.name)

    def _release_subscriptions(self) -> None:
        for sub in self._extra:
            sub.cancel()
        self._extra = []
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def __enter__(self) -> Scene:
        self.mount()
        return self

    def __exit__(self, *exc: object) -> None:
        self.unmount()

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "name": self.name,
            "seed": self._seed,
            "frame_number": self._scheduler.clock.frame_number,
            "elapsed": self._elapsed,
            "arena": self._arena.snapshot(),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        if data.get("name") != self.name:
            raise SnapshotError(
                f"Scene mismatch: snapshot is {data.get('name')!r}, scene is {self.name!r}"
            )
        self._arena.restore(data["arena"])
        self._elapsed = data["elapsed"]
        if self._owns_scheduler:
            self._scheduler.clock.reset(data["frame_number"], data["elapsed"])
            self._origin = 0.0
        else:
            self._origin = self._scheduler.clock.elapsed - self._elapsed
