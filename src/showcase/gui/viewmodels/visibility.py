"""Viewport visibility tracking for the infinite-scroll sentinel.

Geometry and threshold bookkeeping live here without Qt so that they can be
reasoned about (and tested) in isolation; the Qt sensor in
:mod:`showcase.gui.ui.visibility_sensor` only feeds rectangles in.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Protocol

from showcase.config import VISIBILITY_THRESHOLD

VisibilityCallback = Callable[[bool], None]


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return max(0, self.width) * max(0, self.height)


def intersection_ratio(target: Rect, viewport: Rect) -> float:
    """Fraction of *target* inside *viewport*, in ``[0, 1]``.

    A zero-area target counts as fully visible when it touches the viewport.
    """
    left = max(target.x, viewport.x)
    top = max(target.y, viewport.y)
    right = min(target.right, viewport.right)
    bottom = min(target.bottom, viewport.bottom)
    if right < left or bottom < top:
        return 0.0
    if target.area == 0:
        return 1.0
    return ((right - left) * (bottom - top)) / target.area


class VisibilitySensor(Protocol):
    """Contract between a controller and whatever watches its sentinel."""

    def observe(self, callback: VisibilityCallback) -> None: ...

    def release(self) -> None: ...

    def recheck(self) -> None: ...


class VisibilityTracker:
    """Turn a stream of intersection ratios into threshold-crossing callbacks.

    The callback receives ``True`` when the ratio rises to the threshold and
    ``False`` when it falls below it.  The first ratio after :meth:`start`
    is always reported.
    """

    def __init__(self, threshold: float = VISIBILITY_THRESHOLD) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self._threshold = threshold
        self._callback: Optional[VisibilityCallback] = None
        self._visible: Optional[bool] = None

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def active(self) -> bool:
        return self._callback is not None

    @property
    def visible(self) -> bool:
        return bool(self._visible)

    def start(self, callback: VisibilityCallback) -> None:
        self._callback = callback
        self._visible = None

    def stop(self) -> None:
        self._callback = None
        self._visible = None

    def update(self, ratio: float) -> None:
        if self._callback is None:
            return
        visible = ratio >= self._threshold if self._threshold > 0 else ratio > 0
        if visible == self._visible:
            return
        self._visible = visible
        self._callback(visible)

    def recheck(self) -> None:
        """Report visibility again if the sentinel is still on screen."""
        if self._callback is not None and self._visible:
            self._callback(True)
