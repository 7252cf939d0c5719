"""Paginated catalog list ViewModel (MVVM), free of Qt.

Owns the filter/search/page state of one catalog page, issues a fetch for
every state change, merges the results (replace on page 1, append after)
and advances the page when the scroll sentinel becomes visible.

Fetches are tagged with a generation number.  Only the completion of the
most recent fetch is applied, so a slow response for an old filter can no
longer overwrite the results of a newer one.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Dict, List, Optional

from showcase.application.services.options import resolve_selected_option, static_options
from showcase.application.services.paginated_loader import CatalogPageLoader, PageResult
from showcase.application.services.reference_data import ReferenceDataService
from showcase.application.services.thumbnails import resolve_thumbnail_url
from showcase.config import SEARCH_FILTER_KEY, ShowcaseConfig
from showcase.domain.catalogs import CatalogConfig
from showcase.domain.models.core import Item, SelectOption
from showcase.domain.models.query import FilterState
from showcase.errors.handler import ErrorHandler, ErrorSeverity
from showcase.events.bus import EventBus
from showcase.events.catalog_events import ListingFailedEvent, ListingLoadedEvent
from showcase.gui.viewmodels.base import BaseViewModel
from showcase.gui.viewmodels.fetch_runner import FetchRunner, ImmediateRunner
from showcase.gui.viewmodels.signal import ObservableProperty, Signal
from showcase.gui.viewmodels.visibility import VisibilitySensor
from showcase.utils.dates import format_display_date


class PaginatedListViewModel(BaseViewModel):
    """Catalog list ViewModel: pure Python, no Qt dependency."""

    def __init__(
        self,
        catalog: CatalogConfig,
        loader: CatalogPageLoader,
        *,
        config: Optional[ShowcaseConfig] = None,
        runner: Optional[FetchRunner] = None,
        reference_data: Optional[ReferenceDataService] = None,
        event_bus: Optional[EventBus] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        super().__init__()
        self._catalog = catalog
        self._loader = loader
        self._config = config or ShowcaseConfig()
        self._runner = runner or ImmediateRunner()
        self._reference_data = reference_data
        self._event_bus = event_bus
        self._error_handler = error_handler
        self._logger = logging.getLogger(__name__)

        self._generation = 0
        self._sensor: Optional[VisibilitySensor] = None
        self._started = False

        # Observable properties
        self.filters = ObservableProperty(catalog.initial_state())
        self.items = ObservableProperty([])
        self.total_count = ObservableProperty(0)
        self.loading = ObservableProperty(False)
        self.options = ObservableProperty({})

        # Signals
        self.items_reset = Signal()  # emits (items)
        self.items_appended = Signal()  # emits (page_number, page_items)
        self.fetch_failed = Signal()  # emits (message)
        self.status_changed = Signal()

        self.add_cleanup(self._release_sensor)

    # -- read-only state ---------------------------------------------------

    @property
    def catalog(self) -> CatalogConfig:
        return self._catalog

    @property
    def config(self) -> ShowcaseConfig:
        return self._config

    @property
    def state(self) -> FilterState:
        return self.filters.value

    @property
    def page(self) -> int:
        return self.filters.value.page

    @property
    def limit(self) -> int:
        return self.filters.value.limit

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def exhausted(self) -> bool:
        return self.filters.value.is_exhausted(self.total_count.value)

    @property
    def show_loading(self) -> bool:
        return bool(self.loading.value)

    @property
    def show_end_of_results(self) -> bool:
        return self.exhausted and bool(self.items.value) and not self.loading.value

    @property
    def show_empty(self) -> bool:
        return not self.items.value and not self.loading.value

    # -- lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Load selector options and fetch the first page (once)."""
        if self._started or self._disposed:
            return
        self._started = True
        self.load_options()
        self._fetch()

    def attach_sensor(self, sensor: VisibilitySensor) -> None:
        """Observe *sensor*'s sentinel; any previously attached sensor is released."""
        self._release_sensor()
        if self._disposed:
            return
        self._sensor = sensor
        sensor.observe(self.on_sentinel_visibility)

    def dispose(self) -> None:
        if self._disposed:
            return
        # Late responses must not reach a torn-down page
        self._generation += 1
        super().dispose()
        for signal in (self.items_reset, self.items_appended, self.fetch_failed, self.status_changed):
            signal.clear()

    # -- user actions ------------------------------------------------------

    def set_filter(self, key: str, value: str) -> None:
        """Update one filter, go back to page 1 and refetch."""
        if self._disposed:
            return
        if not self._catalog.accepts(key):
            self._logger.warning("Ignoring unknown filter %r for catalog %s", key, self._catalog.name)
            return
        self.filters.value = self.filters.value.with_filter(key, value or "")
        self._fetch()

    def set_search(self, text: str) -> None:
        self.set_filter(SEARCH_FILTER_KEY, text)

    def advance_page(self) -> bool:
        """Request the next page; returns ``False`` when loading or exhausted."""
        if self._disposed or self.loading.value:
            return False
        state = self.filters.value
        if not state.has_more(self.total_count.value):
            return False
        self.filters.value = state.next_page()
        self._fetch()
        return True

    def on_sentinel_visibility(self, visible: bool) -> None:
        if visible:
            self.advance_page()

    # -- presentation helpers ----------------------------------------------

    def options_for(self, key: str) -> List[SelectOption]:
        return list(self.options.value.get(key, []))

    def selected_option(self, key: str) -> Optional[SelectOption]:
        return resolve_selected_option(self.options_for(key), self.filters.value.get(key))

    def thumbnail_url(self, item: Item) -> str:
        return resolve_thumbnail_url(
            item.thumbnail,
            resolved_url=item.thumbnail_url,
            base_url=self._config.image_base_url,
            placeholder=self._config.placeholder_thumbnail,
        )

    def placeholder_thumbnail_url(self) -> str:
        """Where cards load the placeholder image from when their own thumbnail fails."""
        return resolve_thumbnail_url(
            self._config.placeholder_thumbnail, base_url=self._config.image_base_url
        )

    def display_date(self, item: Item) -> str:
        formatted = format_display_date(item.date)
        if formatted:
            return formatted
        return self._catalog.missing_date_text if self._catalog.date_field else ""

    # -- selector options --------------------------------------------------

    def load_options(self) -> None:
        """Populate categorical selectors; reference failures leave only "All"."""
        self.options.value = self._fallback_options()
        if self._reference_data is None:
            return
        self._runner.submit(
            partial(self._reference_data.options_for, self._catalog),
            self._apply_options,
            self._on_options_failed,
        )

    def _fallback_options(self) -> Dict[str, List[SelectOption]]:
        options: Dict[str, List[SelectOption]] = {}
        for spec in self._catalog.filters:
            options[spec.key] = static_options(spec)
        return options

    def _apply_options(self, options: Dict[str, List[SelectOption]]) -> None:
        if self._disposed:
            return
        self.options.value = options

    def _on_options_failed(self, error: Exception) -> None:
        self._report(error, {"catalog": self._catalog.name, "stage": "options"})

    # -- fetching ----------------------------------------------------------

    def _fetch(self) -> None:
        self._generation += 1
        generation = self._generation
        state = self.filters.value
        self.loading.value = True
        self.status_changed.emit()
        self._runner.submit(
            partial(self._loader.fetch_page, state),
            partial(self._on_fetch_succeeded, generation, state),
            partial(self._on_fetch_failed, generation, state),
        )

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._generation

    def _on_fetch_succeeded(self, generation: int, state: FilterState, result: PageResult) -> None:
        if not self._is_current(generation):
            self._logger.debug(
                "Discarding stale %s page %d response (generation %d, current %d)",
                self._catalog.name, state.page, generation, self._generation,
            )
            return

        new_items = list(result.items)
        if state.page == 1:
            self.items.value = new_items
            self.items_reset.emit(new_items)
        else:
            self.items.value = [*self.items.value, *new_items]
            self.items_appended.emit(state.page, new_items)
        self.total_count.value = result.total_count
        self.loading.value = False
        self.status_changed.emit()

        if self._event_bus is not None:
            self._event_bus.publish(ListingLoadedEvent(
                catalog=self._catalog.name,
                page=state.page,
                count=len(new_items),
                total=result.total_count,
            ))
        # A sentinel that is still on screen keeps pulling pages
        if self._sensor is not None:
            self._sensor.recheck()

    def _on_fetch_failed(self, generation: int, state: FilterState, error: Exception) -> None:
        if not self._is_current(generation):
            self._logger.debug(
                "Discarding stale %s page %d failure: %s", self._catalog.name, state.page, error
            )
            return

        self.items.value = []
        self.items_reset.emit([])
        self.total_count.value = 0
        self.loading.value = False
        self.status_changed.emit()

        self._report(error, {"catalog": self._catalog.name, "page": state.page})
        self.fetch_failed.emit(str(error))
        if self._event_bus is not None:
            self._event_bus.publish(ListingFailedEvent(
                catalog=self._catalog.name,
                page=state.page,
                message=str(error),
            ))

    # -- internals ---------------------------------------------------------

    def _report(self, error: Exception, context: Dict[str, Any]) -> None:
        if self._error_handler is not None:
            self._error_handler.handle(error, ErrorSeverity.WARNING, context)
        else:
            self._logger.warning("Error fetching %s: %s", self._catalog.name, error)

    def _release_sensor(self) -> None:
        sensor, self._sensor = self._sensor, None
        if sensor is not None:
            sensor.release()
