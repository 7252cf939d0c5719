"""Top-level window: navigation header, page stack and footer."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from ...appctx import AppContext
from ...config import WINDOW_DEFAULT_SIZE
from ...domain.catalogs import CATALOGS, get_catalog
from ...errors import SettingsError, UnknownCatalogError
from ...errors.handler import ErrorSeverity
from .tasks.thumbnail_loader import ThumbnailLoader
from .widgets.catalog_page import CatalogPage
from .workers import QtFetchRunner

HOME_KEY = "home"

logger = logging.getLogger(__name__)


class HomePage(QWidget):
    """Landing page with one shortcut per catalog."""

    def __init__(self, window: "MainWindow", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("homePage")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(12)

        heading = QLabel("Showcase", self)
        font = heading.font()
        font.setPointSize(font.pointSize() + 12)
        font.setBold(True)
        heading.setFont(font)
        layout.addWidget(heading)
        layout.addWidget(QLabel("Browse our websites, videos and creatives.", self))

        for catalog in CATALOGS.values():
            button = QPushButton(catalog.title, self)
            button.setObjectName(f"homeLink_{catalog.name}")
            button.setSizePolicy(QSizePolicy.Policy.Maximum, QSizePolicy.Policy.Fixed)
            button.clicked.connect(lambda _checked=False, name=catalog.name: window.navigate(name))
            layout.addWidget(button)
        layout.addStretch(1)


class MainWindow(QMainWindow):
    """Hosts at most one live :class:`CatalogPage` at a time."""

    def __init__(self, context: AppContext, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("mainWindow")
        self.setWindowTitle("Showcase")
        self._context = context
        self._runner = QtFetchRunner(parent=self)
        self._thumbnail_loader = ThumbnailLoader(context.image_fetcher.fetch, parent=self)
        self._current_page: Optional[CatalogPage] = None
        self._current_key = HOME_KEY
        self.nav_buttons: Dict[str, QPushButton] = {}

        default_width, default_height = WINDOW_DEFAULT_SIZE
        width = int(context.settings.get("ui.window_width", default_width))
        height = int(context.settings.get("ui.window_height", default_height))
        self.resize(width, height)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QWidget(central)
        header.setObjectName("navHeader")
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(12, 8, 12, 8)
        header_layout.setSpacing(6)
        self._nav_group = QButtonGroup(self)
        self._nav_group.setExclusive(True)
        self._add_nav_button(header, header_layout, HOME_KEY, "Home")
        for catalog in CATALOGS.values():
            self._add_nav_button(header, header_layout, catalog.name, catalog.title)
        header_layout.addStretch(1)
        layout.addWidget(header)

        self.stack = QStackedWidget(central)
        self.stack.setObjectName("pageStack")
        self.home_page = HomePage(self, self.stack)
        self.stack.addWidget(self.home_page)
        layout.addWidget(self.stack, 1)

        self.footer = QLabel(f"API: {context.config.api_base_url}", central)
        self.footer.setObjectName("footer")
        self.footer.setContentsMargins(12, 6, 12, 6)
        self.footer.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self.footer)

        self.setCentralWidget(central)
        self.nav_buttons[HOME_KEY].setChecked(True)
        context.error_handler.register_ui_callback(self._show_error)

    # ------------------------------------------------------------------
    @property
    def current_page(self) -> Optional[CatalogPage]:
        return self._current_page

    @property
    def current_key(self) -> str:
        return self._current_key

    @property
    def runner(self) -> QtFetchRunner:
        return self._runner

    @property
    def thumbnail_loader(self) -> ThumbnailLoader:
        return self._thumbnail_loader

    def navigate(self, key: str) -> None:
        """Switch to *key* (``"home"`` or a catalog name), disposing the old page."""

        if key == self._current_key:
            return
        catalog = None if key == HOME_KEY else get_catalog(key)
        self._dispose_current_page()
        self._current_key = key
        if key in self.nav_buttons:
            self.nav_buttons[key].setChecked(True)

        if catalog is None:
            self.stack.setCurrentWidget(self.home_page)
        else:
            viewmodel = self._context.create_list_viewmodel(catalog, self._runner)
            page = CatalogPage(viewmodel, self.stack, thumbnail_loader=self._thumbnail_loader)
            self.stack.addWidget(page)
            self.stack.setCurrentWidget(page)
            self._current_page = page
            page.start()
        self._remember("ui.last_catalog", None if catalog is None else catalog.name)

    def open_initial_page(self, key: Optional[str] = None) -> None:
        """Open *key* when given, else the last visited catalog.

        An unknown *key* is reported through the error handler, which shows
        it in the status bar, and the window stays on the home page.
        """
        if key is None:
            self.restore_last_page()
            return
        try:
            self.navigate(key)
        except UnknownCatalogError as exc:
            self._context.error_handler.handle(exc, ErrorSeverity.ERROR, {"catalog": key})

    def restore_last_page(self) -> None:
        last = self._context.settings.get("ui.last_catalog")
        if isinstance(last, str) and last in CATALOGS:
            self.navigate(last)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self._dispose_current_page()
        self._remember("ui.window_width", self.width())
        self._remember("ui.window_height", self.height())
        super().closeEvent(event)

    # ------------------------------------------------------------------
    def _add_nav_button(self, parent: QWidget, layout: QHBoxLayout, key: str, text: str) -> None:
        button = QPushButton(text, parent)
        button.setObjectName(f"nav_{key}")
        button.setCheckable(True)
        button.setFlat(True)
        button.clicked.connect(lambda _checked=False, name=key: self.navigate(name))
        self._nav_group.addButton(button)
        self.nav_buttons[key] = button
        layout.addWidget(button)

    def _dispose_current_page(self) -> None:
        page, self._current_page = self._current_page, None
        if page is None:
            return
        page.dispose()
        self.stack.removeWidget(page)
        page.deleteLater()

    def _remember(self, key: str, value: object) -> None:
        try:
            self._context.settings.set(key, value)
        except SettingsError as exc:
            logger.warning("Could not persist %s: %s", key, exc)

    def _show_error(self, message: str, severity: ErrorSeverity) -> None:
        self.statusBar().showMessage(f"{severity.value.title()}: {message}", 8000)


__all__ = ["HomePage", "MainWindow"]
