"""Frame callback factories for event dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from opsviz_signal.bus import EventBus

if TYPE_CHECKING:
    from opsviz import FrameContext


def make_flush_callback(bus: EventBus) -> Callable[[FrameContext], None]:
    """Return a frame callback that delivers queued events once per tick."""

    def flush_events(ctx: FrameContext) -> None:
        bus.flush()

    return flush_events
