"""Reference lists (clients, technologies) backing the categorical selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from showcase.application.services.options import derive_options, static_options
from showcase.application.services.paginated_loader import JsonGetter
from showcase.config import REFERENCE_PAGE_LIMIT
from showcase.domain.catalogs import CatalogConfig
from showcase.domain.models.core import SelectOption
from showcase.errors import ShowcaseError
from showcase.errors.handler import ErrorHandler, ErrorSeverity
from showcase.infrastructure.api.responses import extract_items

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceSource:
    endpoint: str
    response_key: str
    label_fields: Tuple[str, ...]


REFERENCE_SOURCES: Dict[str, ReferenceSource] = {
    "clients": ReferenceSource("clients/listing", "clients", ("client_name", "name")),
    "technologies": ReferenceSource("technologies/listing", "technologies", ("name",)),
}


class ReferenceDataService:
    """Fetch and cache full reference listings.

    Failures degrade to an empty list: the selector then only offers its
    "All" option while the rest of the page keeps working.
    """

    def __init__(self, client: JsonGetter, error_handler: Optional[ErrorHandler] = None) -> None:
        self._client = client
        self._error_handler = error_handler
        self._cache: Dict[str, List[Mapping[str, Any]]] = {}

    def records(self, name: str) -> List[Mapping[str, Any]]:
        if name in self._cache:
            return self._cache[name]
        source = REFERENCE_SOURCES.get(name)
        if source is None:
            LOGGER.warning("No reference source named %r", name)
            return []
        params = {"page": 1, "limit": REFERENCE_PAGE_LIMIT, "keyword": ""}
        try:
            body = self._client.get(source.endpoint, params)
            records = extract_items(body, source.response_key)
        except ShowcaseError as exc:
            self._report(exc, name)
            return []
        self._cache[name] = records
        return records

    def options_for(self, catalog: CatalogConfig) -> Dict[str, List[SelectOption]]:
        """Selector options for every categorical filter of *catalog*."""
        options: Dict[str, List[SelectOption]] = {}
        for spec in catalog.filters:
            if spec.reference:
                source = REFERENCE_SOURCES.get(spec.reference)
                label_fields = source.label_fields if source else ("name",)
                options[spec.key] = derive_options(
                    self.records(spec.reference), spec.category, label_fields
                )
            else:
                options[spec.key] = static_options(spec)
        return options

    def clear(self) -> None:
        self._cache.clear()

    def _report(self, exc: Exception, name: str) -> None:
        if self._error_handler is not None:
            self._error_handler.handle(exc, ErrorSeverity.WARNING, {"reference": name})
        else:
            LOGGER.warning("Error fetching %s: %s", name, exc)


__all__ = ["REFERENCE_SOURCES", "ReferenceDataService", "ReferenceSource"]
