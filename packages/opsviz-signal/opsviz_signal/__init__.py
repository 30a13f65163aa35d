"""opsviz-signal - In-process event bus for console hosts."""
from __future__ import annotations

from opsviz_signal.bus import EventBus, EventSubscription
from opsviz_signal.systems import make_flush_callback

__all__ = ["EventBus", "EventSubscription", "make_flush_callback"]
