from .bus import Event, EventBus, Subscription
from .catalog_events import (
    LoadingStateChangedEvent,
    ResourcesUpdatedEvent,
    TimelineResourcesChangedEvent,
)
from .signal import Signal

__all__ = [
    "Event",
    "EventBus",
    "LoadingStateChangedEvent",
    "ResourcesUpdatedEvent",
    "Signal",
    "Subscription",
    "TimelineResourcesChangedEvent",
]
