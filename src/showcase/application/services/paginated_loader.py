"""Stateless page loader for catalog listings.

Translates a :class:`FilterState` into listing query parameters through the
catalog's configuration, performs the request and parses the response into
a :class:`PageResult`.  Accumulating pages is the view model's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Protocol

from showcase.domain.catalogs import CatalogConfig
from showcase.domain.models.core import Item
from showcase.domain.models.query import FilterState
from showcase.errors import DetailsUnavailableError
from showcase.infrastructure.api.responses import extract_items, extract_total

LOGGER = logging.getLogger(__name__)


class JsonGetter(Protocol):
    """Minimal protocol for the HTTP side of the API client."""

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any: ...


@dataclass
class PageResult:
    """Result of loading a single page."""

    items: List[Item] = field(default_factory=list)
    page: int = 1
    page_size: int = 1
    total_count: int = 0

    @property
    def has_more(self) -> bool:
        return self.page * self.page_size < self.total_count


class CatalogPageLoader:
    """Fetch one page of a catalog listing."""

    def __init__(self, client: JsonGetter, catalog: CatalogConfig) -> None:
        self._client = client
        self._catalog = catalog

    @property
    def catalog(self) -> CatalogConfig:
        return self._catalog

    def fetch_page(self, state: FilterState) -> PageResult:
        """Load the page described by *state*.

        Raises the client's errors unchanged; callers decide the failure policy.
        """
        catalog = self._catalog
        params = catalog.build_params(state)
        body = self._client.get(catalog.endpoint, params)
        records = extract_items(body, catalog.response_key)
        total = extract_total(body, records)
        items = [self._to_item(record) for record in records]
        LOGGER.debug(
            "Loaded %s page %d: %d items (total %d)",
            catalog.name, state.page, len(items), total,
        )
        return PageResult(items=items, page=state.page, page_size=state.limit, total_count=total)

    def fetch_details(self, item_id: Any) -> Mapping[str, Any]:
        """Return the raw detail record for *item_id*."""
        catalog = self._catalog
        if not catalog.detail_endpoint:
            raise DetailsUnavailableError(f"Catalog '{catalog.name}' has no detail endpoint")
        body = self._client.get(catalog.detail_endpoint.format(id=item_id))
        if isinstance(body, Mapping):
            data = body.get("data")
            if isinstance(data, Mapping):
                return data
            return body
        return {}

    def _to_item(self, record: Mapping[str, Any]) -> Item:
        catalog = self._catalog
        return Item.from_record(
            record,
            title_field=catalog.title_field,
            date_field=catalog.date_field,
            thumbnail_url_field=catalog.thumbnail_url_field,
            subtitle_field=catalog.subtitle_field,
            link_field=catalog.link_field,
        )


__all__ = ["CatalogPageLoader", "JsonGetter", "PageResult"]
