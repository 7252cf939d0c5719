from .bus import Event, EventBus, Subscription
from .catalog_events import ListingFailedEvent, ListingLoadedEvent

__all__ = [
    "Event",
    "EventBus",
    "ListingFailedEvent",
    "ListingLoadedEvent",
    "Subscription",
]
