"""Shared thumbnail loader feeding every card on a page."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, QSize, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage

from ....config import THUMBNAIL_SIZE, THUMBNAIL_THREADS
from .thumbnail_load_worker import ImageFetch, ThumbnailLoadWorker

logger = logging.getLogger(__name__)


class ThumbnailLoader(QObject):
    """Dispatch :class:`ThumbnailLoadWorker` jobs and cache their results by URL.

    Each URL is fetched at most once: decoded images are kept for later
    requests, and a URL that failed stays failed for the loader's lifetime.
    """

    thumbnailReady = Signal(str, QImage)
    thumbnailFailed = Signal(str, str)

    def __init__(
        self,
        fetch: ImageFetch,
        *,
        target: Optional[QSize] = None,
        max_threads: int = THUMBNAIL_THREADS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._fetch = fetch
        self._target = target if target is not None else QSize(*THUMBNAIL_SIZE)
        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(max_threads)
        self._images: Dict[str, QImage] = {}
        self._failures: Dict[str, str] = {}
        self._workers: Dict[str, ThumbnailLoadWorker] = {}

    def cached(self, url: str) -> Optional[QImage]:
        return self._images.get(url)

    def failure(self, url: str) -> Optional[str]:
        return self._failures.get(url)

    def is_pending(self, url: str) -> bool:
        return url in self._workers

    def request(self, url: str) -> None:
        """Start loading *url* unless it is cached, known bad or already in flight."""
        if url in self._images or url in self._failures or url in self._workers:
            return
        worker = ThumbnailLoadWorker(url, self._fetch, self._target)
        worker.signals.thumbnailLoaded.connect(self._on_loaded)
        worker.signals.loadFailed.connect(self._on_failed)
        # Keep the worker (and its signals object) alive until it reports back.
        self._workers[url] = worker
        self._pool.start(worker)

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)

    @Slot(str, QImage)
    def _on_loaded(self, url: str, image: QImage) -> None:
        self._workers.pop(url, None)
        self._images[url] = image
        self.thumbnailReady.emit(url, image)

    @Slot(str, str)
    def _on_failed(self, url: str, message: str) -> None:
        self._workers.pop(url, None)
        self._failures[url] = message
        logger.debug("Thumbnail %s failed: %s", url, message)
        self.thumbnailFailed.emit(url, message)


__all__ = ["ThumbnailLoader"]
