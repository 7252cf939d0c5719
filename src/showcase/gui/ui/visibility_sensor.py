"""Qt visibility sensor watching a sentinel widget inside a scroll area."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, QObject, QPoint, QTimer
from PySide6.QtWidgets import QScrollArea, QWidget

from ...config import VISIBILITY_THRESHOLD
from ..viewmodels.visibility import Rect, VisibilityCallback, VisibilityTracker, intersection_ratio

_WATCHED_EVENTS = {
    QEvent.Type.Resize,
    QEvent.Type.Move,
    QEvent.Type.Show,
    QEvent.Type.Hide,
    QEvent.Type.LayoutRequest,
}


class ScrollAreaVisibilitySensor(QObject):
    """Report when *target* crosses the visibility threshold of *scroll_area*.

    Geometry changes (scrolling, resizes, layout passes) are coalesced into a
    single evaluation on the next event-loop iteration.
    """

    def __init__(
        self,
        scroll_area: QScrollArea,
        target: QWidget,
        threshold: float = VISIBILITY_THRESHOLD,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent or scroll_area)
        self._scroll_area = scroll_area
        self._target = target
        self._tracker = VisibilityTracker(threshold)
        self._observing = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(0)
        self._timer.timeout.connect(self.evaluate)

        self._recheck_timer = QTimer(self)
        self._recheck_timer.setSingleShot(True)
        self._recheck_timer.setInterval(0)
        self._recheck_timer.timeout.connect(self._recheck_now)

    @property
    def observing(self) -> bool:
        return self._observing

    def observe(self, callback: VisibilityCallback) -> None:
        self.release()
        self._tracker.start(callback)
        bar = self._scroll_area.verticalScrollBar()
        bar.valueChanged.connect(self._schedule)
        bar.rangeChanged.connect(self._schedule)
        self._scroll_area.viewport().installEventFilter(self)
        self._target.installEventFilter(self)
        self._observing = True
        self._schedule()

    def release(self) -> None:
        if not self._observing:
            return
        self._observing = False
        self._timer.stop()
        self._recheck_timer.stop()
        bar = self._scroll_area.verticalScrollBar()
        bar.valueChanged.disconnect(self._schedule)
        bar.rangeChanged.disconnect(self._schedule)
        self._scroll_area.viewport().removeEventFilter(self)
        self._target.removeEventFilter(self)
        self._tracker.stop()

    def recheck(self) -> None:
        if self._observing:
            self._recheck_timer.start()

    def intersection_ratio(self) -> float:
        if not self._target.isVisible():
            return 0.0
        viewport = self._scroll_area.viewport()
        origin = self._target.mapTo(viewport, QPoint(0, 0))
        target = Rect(origin.x(), origin.y(), self._target.width(), self._target.height())
        return intersection_ratio(target, Rect(0, 0, viewport.width(), viewport.height()))

    def evaluate(self) -> None:
        if self._observing:
            self._tracker.update(self.intersection_ratio())

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if self._observing and event.type() in _WATCHED_EVENTS:
            self._schedule()
        return super().eventFilter(watched, event)

    def _schedule(self, *_args) -> None:
        if self._observing:
            self._timer.start()

    def _recheck_now(self) -> None:
        if not self._observing:
            return
        # Layout may have pushed the sentinel off screen since the last pass
        self.evaluate()
        self._tracker.recheck()


__all__ = ["ScrollAreaVisibilitySensor"]
