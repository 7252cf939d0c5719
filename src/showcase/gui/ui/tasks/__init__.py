"""Background tasks used by the Qt front-end."""

from .thumbnail_load_worker import ThumbnailLoadWorker, ThumbnailLoadWorkerSignals
from .thumbnail_loader import ThumbnailLoader

__all__ = ["ThumbnailLoadWorker", "ThumbnailLoadWorkerSignals", "ThumbnailLoader"]
