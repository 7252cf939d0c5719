"""Search box and categorical selectors shown above a catalog listing."""

from __future__ import annotations

from typing import Dict, List

from PySide6.QtCore import QSignalBlocker, QTimer
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLineEdit, QWidget

from ....domain.models.core import SelectOption
from ...viewmodels.paginated_list_viewmodel import PaginatedListViewModel

SEARCH_DEBOUNCE_MS = 300


class FilterBar(QWidget):
    """Bind a search field and one combo box per filter to a list ViewModel."""

    def __init__(self, viewmodel: PaginatedListViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("filterBar")
        self._viewmodel = viewmodel
        self.combos: Dict[str, QComboBox] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.search_edit = QLineEdit(self)
        self.search_edit.setObjectName("searchEdit")
        self.search_edit.setPlaceholderText(viewmodel.catalog.search_placeholder)
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.setText(viewmodel.state.search)
        layout.addWidget(self.search_edit, 1)

        self._search_timer = QTimer(self)
        self._search_timer.setSingleShot(True)
        self._search_timer.setInterval(SEARCH_DEBOUNCE_MS)
        self._search_timer.timeout.connect(self.commit_search)
        self.search_edit.textChanged.connect(lambda _text: self._search_timer.start())
        self.search_edit.returnPressed.connect(self.commit_search)

        for spec in viewmodel.catalog.filters:
            combo = QComboBox(self)
            combo.setObjectName(f"{spec.key}Combo")
            combo.setMinimumWidth(160)
            combo.currentIndexChanged.connect(
                lambda index, key=spec.key: self._on_combo_changed(key, index)
            )
            self.combos[spec.key] = combo
            layout.addWidget(combo)

        self.refresh_options()
        viewmodel.options.changed.connect(self._on_options_changed)

    def commit_search(self) -> None:
        self._search_timer.stop()
        text = self.search_edit.text()
        if text != self._viewmodel.state.search:
            self._viewmodel.set_search(text)

    def refresh_options(self) -> None:
        """Repopulate every combo box from the ViewModel's current options."""
        for key, combo in self.combos.items():
            self._populate(combo, self._viewmodel.options_for(key), key)

    def disconnect_viewmodel(self) -> None:
        self._search_timer.stop()
        self._viewmodel.options.changed.disconnect(self._on_options_changed)

    def _on_options_changed(self, _new: object, _old: object) -> None:
        self.refresh_options()

    def _populate(self, combo: QComboBox, options: List[SelectOption], key: str) -> None:
        blocker = QSignalBlocker(combo)
        combo.clear()
        for option in options:
            combo.addItem(option.label, option.value)
        selected = self._viewmodel.selected_option(key)
        if selected is not None:
            combo.setCurrentIndex(max(0, combo.findData(selected.value)))
        blocker.unblock()

    def _on_combo_changed(self, key: str, index: int) -> None:
        if index < 0:
            return
        value = self.combos[key].itemData(index) or ""
        if value != self._viewmodel.state.get(key):
            self._viewmodel.set_filter(key, str(value))


__all__ = ["FilterBar"]
