"""Scrollable catalog page: filter bar, card grid and infinite-scroll sentinel."""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from ....config import SENTINEL_HEIGHT
from ....domain.models.core import Item
from ...viewmodels.paginated_list_viewmodel import PaginatedListViewModel
from ..tasks.thumbnail_loader import ThumbnailLoader
from ..visibility_sensor import ScrollAreaVisibilitySensor
from .filter_bar import FilterBar
from .flow_layout import FlowLayout
from .item_card import ItemCard

logger = logging.getLogger(__name__)


class CatalogPage(QWidget):
    """Render one :class:`PaginatedListViewModel` and feed scroll events back to it."""

    def __init__(
        self,
        viewmodel: PaginatedListViewModel,
        parent: QWidget | None = None,
        *,
        thumbnail_loader: Optional[ThumbnailLoader] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName(f"catalogPage_{viewmodel.catalog.name}")
        self._viewmodel = viewmodel
        self._disposed = False
        self._thumbnail_loader = thumbnail_loader
        self._placeholder_url = viewmodel.placeholder_thumbnail_url()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 0)
        layout.setSpacing(12)

        self.title_label = QLabel(viewmodel.catalog.title, self)
        self.title_label.setObjectName("catalogTitle")
        font = self.title_label.font()
        font.setPointSize(font.pointSize() + 6)
        font.setBold(True)
        self.title_label.setFont(font)
        layout.addWidget(self.title_label)

        self.filter_bar = FilterBar(viewmodel, self)
        layout.addWidget(self.filter_bar)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setObjectName("catalogScrollArea")
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        layout.addWidget(self.scroll_area, 1)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(12)

        self.grid = QWidget(content)
        self.grid.setObjectName("catalogGrid")
        self.flow_layout = FlowLayout(self.grid, margin=0, h_spacing=16, v_spacing=16)
        content_layout.addWidget(self.grid)

        # The sentinel doubles as the status line under the last card.
        self.sentinel = QLabel(content)
        self.sentinel.setObjectName("catalogSentinel")
        self.sentinel.setFixedHeight(SENTINEL_HEIGHT)
        self.sentinel.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content_layout.addWidget(self.sentinel)
        content_layout.addStretch(1)

        self.scroll_area.setWidget(content)

        viewmodel.items_reset.connect(self._on_items_reset)
        viewmodel.items_appended.connect(self._on_items_appended)
        viewmodel.status_changed.connect(self.refresh_status)

        self.sensor = ScrollAreaVisibilitySensor(self.scroll_area, self.sentinel, parent=self)
        viewmodel.attach_sensor(self.sensor)
        viewmodel.add_cleanup(self._disconnect_viewmodel)

        self._render(viewmodel.items.value, reset=True)
        self.refresh_status()

    @property
    def viewmodel(self) -> PaginatedListViewModel:
        return self._viewmodel

    @property
    def status_text(self) -> str:
        return self.sentinel.text()

    def cards(self) -> List[ItemCard]:
        return [widget for widget in self.flow_layout.widgets() if isinstance(widget, ItemCard)]

    def start(self) -> None:
        self._viewmodel.start()

    def refresh_status(self) -> None:
        vm = self._viewmodel
        catalog = vm.catalog
        if vm.show_loading:
            text = catalog.loading_message
        elif vm.show_empty:
            text = catalog.empty_message
        elif vm.show_end_of_results:
            text = catalog.end_message
        else:
            text = ""
        self.sentinel.setText(text)

    def dispose(self) -> None:
        """Tear down the ViewModel; its cleanups release the sensor and our bindings."""
        if self._disposed:
            return
        self._disposed = True
        self._viewmodel.dispose()

    # -- rendering ---------------------------------------------------------

    def _on_items_reset(self, items: List[Item]) -> None:
        self._render(items, reset=True)

    def _on_items_appended(self, _page: int, items: List[Item]) -> None:
        self._render(items, reset=False)

    def _render(self, items: List[Item], *, reset: bool) -> None:
        if reset:
            self.flow_layout.clear()
        for item in items:
            card = ItemCard(
                item,
                thumbnail_url=self._viewmodel.thumbnail_url(item),
                date_text=self._viewmodel.display_date(item),
                thumbnail_loader=self._thumbnail_loader,
                placeholder_url=self._placeholder_url,
                parent=self.grid,
            )
            self.flow_layout.addWidget(card)
        self.grid.updateGeometry()
        logger.debug(
            "Rendered %d %s cards (reset=%s)", len(items), self._viewmodel.catalog.name, reset
        )

    def _disconnect_viewmodel(self) -> None:
        vm = self._viewmodel
        vm.items_reset.disconnect(self._on_items_reset)
        vm.items_appended.disconnect(self._on_items_appended)
        vm.status_changed.disconnect(self.refresh_status)
        self.filter_bar.disconnect_viewmodel()


__all__ = ["CatalogPage"]
