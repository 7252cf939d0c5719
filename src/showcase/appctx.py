"""Application-wide context shared by the GUI and the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .application.services.paginated_loader import CatalogPageLoader
from .application.services.reference_data import ReferenceDataService
from .config import ShowcaseConfig
from .domain.catalogs import CatalogConfig
from .errors.handler import ErrorHandler
from .events.bus import EventBus
from .infrastructure.api.client import ApiClient
from .infrastructure.api.images import ImageFetcher

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .gui.viewmodels.fetch_runner import FetchRunner
    from .gui.viewmodels.paginated_list_viewmodel import PaginatedListViewModel
    from .settings.manager import SettingsManager


def _create_settings_manager() -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager()
    manager.load()
    return manager


@dataclass
class AppContext:
    """Container object wiring settings, the API clients and shared services."""

    settings: "SettingsManager" = field(default_factory=_create_settings_manager)
    config: Optional[ShowcaseConfig] = None
    event_bus: EventBus = field(default_factory=EventBus)
    client: Optional[ApiClient] = None
    error_handler: Optional[ErrorHandler] = None
    reference_data: Optional[ReferenceDataService] = None
    image_fetcher: Optional[ImageFetcher] = None

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = self.settings.to_config()
        if self.client is None:
            self.client = ApiClient(self.config.api_base_url)
        if self.error_handler is None:
            self.error_handler = ErrorHandler(logging.getLogger("showcase"), self.event_bus)
        if self.reference_data is None:
            self.reference_data = ReferenceDataService(self.client, self.error_handler)
        if self.image_fetcher is None:
            self.image_fetcher = ImageFetcher()

    @classmethod
    def create(
        cls,
        settings_path: Optional[Path] = None,
        *,
        api_url: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> "AppContext":
        """Load settings from *settings_path* and apply command-line overrides."""

        from .settings.manager import SettingsManager

        settings = SettingsManager(settings_path)
        settings.load()
        config = settings.to_config()
        if api_url or image_url:
            config = ShowcaseConfig(
                api_base_url=api_url or config.api_base_url,
                image_base_url=image_url or config.image_base_url,
                placeholder_thumbnail=config.placeholder_thumbnail,
            )
        return cls(settings=settings, config=config)

    def loader_for(self, catalog: CatalogConfig) -> CatalogPageLoader:
        return CatalogPageLoader(self.client, catalog)

    def create_list_viewmodel(
        self,
        catalog: CatalogConfig,
        runner: Optional["FetchRunner"] = None,
    ) -> "PaginatedListViewModel":
        from .gui.viewmodels.paginated_list_viewmodel import PaginatedListViewModel

        return PaginatedListViewModel(
            catalog,
            self.loader_for(catalog),
            config=self.config,
            runner=runner,
            reference_data=self.reference_data,
            event_bus=self.event_bus,
            error_handler=self.error_handler,
        )

    def close(self) -> None:
        self.client.close()
        self.image_fetcher.close()
        self.event_bus.shutdown()


__all__ = ["AppContext"]
