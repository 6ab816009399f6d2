"""Runtime primitives: deferral, pub/sub, logging and error policy."""

from layernav.runtime.event_bus import EventBus, Subscription
from layernav.runtime.scheduler import Deferrer, Scheduler

__all__ = ["Deferrer", "EventBus", "Scheduler", "Subscription"]
