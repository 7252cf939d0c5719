"""Helpers for decoding downloaded images with Qt."""

from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QImage


def qimage_from_bytes(data: bytes) -> Optional[QImage]:
    """Return a :class:`QImage` decoded from *data*, or ``None`` when Qt cannot read it."""

    if not data:
        return None
    image = QImage()
    if image.loadFromData(data):
        return image
    for fmt in ("JPEG", "PNG", "WEBP", "GIF"):
        if image.loadFromData(data, fmt):
            return image
    return None


__all__ = ["qimage_from_bytes"]
