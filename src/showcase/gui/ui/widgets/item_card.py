"""Card widget rendering one catalog item."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QFrame, QLabel, QSizePolicy, QVBoxLayout, QWidget

from ....config import CARD_THUMBNAIL_HEIGHT, CARD_WIDTH
from ....domain.models.core import Item
from ..tasks.thumbnail_loader import ThumbnailLoader

logger = logging.getLogger(__name__)

NO_PREVIEW_TEXT = "No preview"


class ItemCard(QFrame):
    """Fixed-width card with a thumbnail, title, subtitle and date.

    With a :class:`ThumbnailLoader` the card requests its thumbnail URL and
    falls back to *placeholder_url* when that image cannot be loaded.
    """

    def __init__(
        self,
        item: Item,
        *,
        thumbnail_url: str,
        date_text: str = "",
        thumbnail_loader: Optional[ThumbnailLoader] = None,
        placeholder_url: Optional[str] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("itemCard")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setFixedWidth(CARD_WIDTH)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Preferred)
        self._item = item
        self._thumbnail_url = thumbnail_url
        self._placeholder_url = placeholder_url
        self._loader = thumbnail_loader
        self._thumbnail_source: Optional[str] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(4)

        self.thumbnail_label = QLabel(self)
        self.thumbnail_label.setObjectName("itemThumbnail")
        self.thumbnail_label.setFixedHeight(CARD_THUMBNAIL_HEIGHT)
        self.thumbnail_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.thumbnail_label.setToolTip(thumbnail_url)
        self.thumbnail_label.setStyleSheet("background: palette(midlight); color: palette(mid);")
        layout.addWidget(self.thumbnail_label)

        self.title_label = QLabel(item.title or "Untitled", self)
        self.title_label.setObjectName("itemTitle")
        self.title_label.setWordWrap(True)
        font = self.title_label.font()
        font.setBold(True)
        self.title_label.setFont(font)
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(item.subtitle or "", self)
        self.subtitle_label.setObjectName("itemSubtitle")
        self.subtitle_label.setVisible(bool(item.subtitle))
        layout.addWidget(self.subtitle_label)

        self.date_label = QLabel(date_text, self)
        self.date_label.setObjectName("itemDate")
        self.date_label.setVisible(bool(date_text))
        layout.addWidget(self.date_label)

        self.link_label = QLabel(self)
        self.link_label.setObjectName("itemLink")
        if item.link:
            self.link_label.setText(f'<a href="{item.link}">Open</a>')
            self.link_label.setOpenExternalLinks(True)
            self.link_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextBrowserInteraction)
        self.link_label.setVisible(bool(item.link))
        layout.addWidget(self.link_label)

        if self._loader is None:
            self.thumbnail_label.setText(NO_PREVIEW_TEXT)
        else:
            self._loader.thumbnailReady.connect(self._on_thumbnail_ready)
            self._loader.thumbnailFailed.connect(self._on_thumbnail_failed)
            self._load_thumbnail(thumbnail_url)

    @property
    def item(self) -> Item:
        return self._item

    @property
    def thumbnail_url(self) -> str:
        return self._thumbnail_url

    @property
    def thumbnail_source(self) -> Optional[str]:
        """URL of the image currently shown or requested; ``None`` once loading gave up."""
        return self._thumbnail_source

    @property
    def has_thumbnail(self) -> bool:
        return not self.thumbnail_label.pixmap().isNull()

    # ------------------------------------------------------------------
    def _load_thumbnail(self, url: str) -> None:
        loader = self._loader
        self._thumbnail_source = url
        image = loader.cached(url)
        if image is not None:
            self._show_image(image)
            return
        message = loader.failure(url)
        if message is not None:
            self._on_thumbnail_failed(url, message)
            return
        self.thumbnail_label.setText("")
        loader.request(url)

    @Slot(str, QImage)
    def _on_thumbnail_ready(self, url: str, image: QImage) -> None:
        if url == self._thumbnail_source:
            self._show_image(image)

    @Slot(str, str)
    def _on_thumbnail_failed(self, url: str, message: str) -> None:
        if url != self._thumbnail_source:
            return
        placeholder = self._placeholder_url
        if placeholder and url != placeholder:
            logger.debug("Thumbnail %s unavailable (%s), using placeholder", url, message)
            self._load_thumbnail(placeholder)
            return
        self._thumbnail_source = None
        self._detach_loader()
        self.thumbnail_label.setText(NO_PREVIEW_TEXT)

    def _show_image(self, image: QImage) -> None:
        self._detach_loader()
        self.thumbnail_label.setPixmap(QPixmap.fromImage(image))

    def _detach_loader(self) -> None:
        loader, self._loader = self._loader, None
        if loader is None:
            return
        loader.thumbnailReady.disconnect(self._on_thumbnail_ready)
        loader.thumbnailFailed.disconnect(self._on_thumbnail_failed)


__all__ = ["ItemCard", "NO_PREVIEW_TEXT"]
