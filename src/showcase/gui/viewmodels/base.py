"""BaseViewModel: pure Python, no Qt dependency.

Tracks ``EventBus`` subscriptions and teardown callbacks so a concrete
ViewModel can release everything it acquired with a single ``dispose()``.
"""

from __future__ import annotations

import logging
from typing import Callable, Type

from showcase.events.bus import EventBus, Subscription

_logger = logging.getLogger(__name__)


class BaseViewModel:
    """ViewModel base class: pure Python, no Qt dependency."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._cleanups: list[Callable[[], None]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        """Subscribe to an event type and track the subscription."""
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def add_cleanup(self, callback: Callable[[], None]) -> None:
        """Register *callback* to run once on :meth:`dispose`."""
        self._cleanups.append(callback)

    def dispose(self) -> None:
        """Cancel tracked subscriptions and run cleanups, newest first."""
        if self._disposed:
            return
        self._disposed = True
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        while self._cleanups:
            callback = self._cleanups.pop()
            try:
                callback()
            except Exception:
                _logger.exception("Cleanup %r failed during dispose", callback)
