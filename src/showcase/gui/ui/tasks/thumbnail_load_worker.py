"""Worker that downloads and decodes card thumbnails off the UI thread."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QRunnable, QSize, Qt, Signal
from PySide6.QtGui import QImage

from ....utils import image_loader

ImageFetch = Callable[[str], bytes]


class ThumbnailLoadWorkerSignals(QObject):
    """Signals exposed by :class:`ThumbnailLoadWorker`.

    The signal container is kept apart from the runnable so slots run on the
    GUI thread whichever pool thread picked up the job.
    """

    thumbnailLoaded = Signal(str, QImage)
    """Emitted with the source URL once the decoded image is ready."""

    loadFailed = Signal(str, str)
    """Emitted with the source URL and a reason when fetching or decoding fails."""


class ThumbnailLoadWorker(QRunnable):
    """Fetch *url* through *fetch* and decode it into a ``QImage``."""

    def __init__(self, url: str, fetch: ImageFetch, target: Optional[QSize] = None) -> None:
        super().__init__()
        self._url = url
        self._fetch = fetch
        self._target = target
        self.signals = ThumbnailLoadWorkerSignals()

    @property
    def url(self) -> str:
        return self._url

    def run(self) -> None:  # type: ignore[override]
        try:
            data = self._fetch(self._url)
            image = image_loader.qimage_from_bytes(data)
        except Exception as exc:
            self.signals.loadFailed.emit(self._url, str(exc))
            return

        if image is None or image.isNull():
            self.signals.loadFailed.emit(self._url, "Loaded image is null")
            return

        target = self._target
        if target is not None and target.isValid() and not target.isEmpty():
            image = image.scaled(
                target,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        self.signals.thumbnailLoaded.emit(self._url, image)


__all__ = ["ImageFetch", "ThumbnailLoadWorker", "ThumbnailLoadWorkerSignals"]
