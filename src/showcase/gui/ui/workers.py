"""Background QRunnable workers for listing and reference-data fetches."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from ..viewmodels.fetch_runner import ErrorCallback, SuccessCallback, Task

_logger = logging.getLogger(__name__)


class _FetchSignals(QObject):
    succeeded = Signal(int, object)
    failed = Signal(int, object)


class _FetchWorker(QRunnable):
    def __init__(self, ticket: int, task: Task) -> None:
        super().__init__()
        self._ticket = ticket
        self._task = task
        self.signals = _FetchSignals()

    def run(self) -> None:
        try:
            result = self._task()
        except Exception as exc:
            _logger.debug("[FETCH-WORKER] ticket %d failed: %s", self._ticket, exc)
            self.signals.failed.emit(self._ticket, exc)
            return
        self.signals.succeeded.emit(self._ticket, result)


class QtFetchRunner(QObject):
    """Run fetches on a ``QThreadPool`` and report back on the GUI thread.

    The runner lives on the GUI thread, so the workers' signals reach its
    slots through queued connections; callbacks therefore never run on a
    pool thread.
    """

    def __init__(self, pool: Optional[QThreadPool] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._callbacks: Dict[int, Tuple[SuccessCallback, ErrorCallback]] = {}
        self._next_ticket = 0

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    def submit(self, task: Task, on_success: SuccessCallback, on_error: ErrorCallback) -> None:
        self._next_ticket += 1
        ticket = self._next_ticket
        self._callbacks[ticket] = (on_success, on_error)
        worker = _FetchWorker(ticket, task)
        worker.signals.succeeded.connect(self._on_succeeded)
        worker.signals.failed.connect(self._on_failed)
        self._pool.start(worker)

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)

    @Slot(int, object)
    def _on_succeeded(self, ticket: int, result: object) -> None:
        callbacks = self._callbacks.pop(ticket, None)
        if callbacks is not None:
            callbacks[0](result)

    @Slot(int, object)
    def _on_failed(self, ticket: int, error: object) -> None:
        callbacks = self._callbacks.pop(ticket, None)
        if callbacks is not None:
            callbacks[1](error)


__all__ = ["QtFetchRunner"]
