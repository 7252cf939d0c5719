from dataclasses import dataclass

from .bus import Event


@dataclass(kw_only=True)
class ListingLoadedEvent(Event):
    catalog: str = ""
    page: int = 1
    count: int = 0
    total: int = 0


@dataclass(kw_only=True)
class ListingFailedEvent(Event):
    catalog: str = ""
    page: int = 1
    message: str = ""
