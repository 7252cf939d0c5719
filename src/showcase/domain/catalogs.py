"""Catalog registry: one configuration object per listing page.

Each :class:`CatalogConfig` captures everything that differs between the
websites, landing pages, videos and creatives listings (endpoint, filters,
page size, response key and display fields) so that a single controller can
drive all of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from showcase.config import CARD_PAGE_SIZE, SEARCH_FILTER_KEY, VIDEO_PAGE_SIZE
from showcase.domain.models.core import SelectOption
from showcase.domain.models.query import FilterState
from showcase.errors import UnknownCatalogError


@dataclass(frozen=True)
class FilterSpec:
    """A categorical selector shown next to the search box.

    Options come either from a reference list fetched at start-up
    (``reference``) or from the fixed ``choices``.
    """

    key: str
    category: str
    reference: Optional[str] = None
    choices: Tuple[SelectOption, ...] = ()
    sort_choices: bool = False
    numeric: bool = False

    def to_param(self, value: str) -> Any:
        """Translate a stored value into a query parameter, ``None`` when unset."""
        if not value:
            return None
        if self.numeric:
            try:
                return int(value)
            except ValueError:
                return value
        return value


@dataclass(frozen=True)
class CatalogConfig:
    name: str
    title: str
    noun: str
    endpoint: str
    response_key: str
    page_size: int
    filters: Tuple[FilterSpec, ...] = ()
    fixed_params: Mapping[str, str] = field(default_factory=dict)
    search_placeholder: str = "Search by title"
    title_field: str = "title"
    date_field: Optional[str] = "created_at"
    missing_date_text: str = "No creation date"
    thumbnail_url_field: Optional[str] = None
    subtitle_field: Optional[str] = None
    link_field: Optional[str] = None
    detail_endpoint: Optional[str] = None

    @property
    def filter_keys(self) -> Tuple[str, ...]:
        return tuple(spec.key for spec in self.filters)

    @property
    def empty_message(self) -> str:
        return f"No {self.noun} available"

    @property
    def loading_message(self) -> str:
        return f"Loading more {self.noun}..."

    @property
    def end_message(self) -> str:
        return f"No more {self.noun} to load"

    def filter_spec(self, key: str) -> Optional[FilterSpec]:
        for spec in self.filters:
            if spec.key == key:
                return spec
        return None

    def accepts(self, key: str) -> bool:
        return key == SEARCH_FILTER_KEY or self.filter_spec(key) is not None

    def initial_state(self) -> FilterState:
        return FilterState.initial(self.page_size, self.filter_keys)

    def build_params(self, state: FilterState) -> Dict[str, Any]:
        """Translate *state* into listing query parameters (unset filters omitted)."""
        params: Dict[str, Any] = {
            "page": state.page,
            "limit": state.limit,
            "keyword": state.search,
        }
        params.update(self.fixed_params)
        for spec in self.filters:
            value = spec.to_param(state.get(spec.key))
            if value is not None:
                params[spec.key] = value
        return params


CLIENT_FILTER = FilterSpec(
    key="client_id", category="Clients", reference="clients", numeric=True
)
TECHNOLOGY_FILTER = FilterSpec(
    key="technology_id", category="Technologies", reference="technologies", numeric=True
)
FORMAT_FILTER = FilterSpec(
    key="format",
    category="Formats",
    choices=(
        SelectOption("LANDSCAPE", "Landscape"),
        SelectOption("PORTRAIT", "Portrait"),
        SelectOption("SQUARE", "Square"),
    ),
)
CREATIVE_TYPE_FILTER = FilterSpec(
    key="type",
    category="Types",
    choices=(
        SelectOption("BROCHURE", "Brochure"),
        SelectOption("LOGO", "Logo"),
    ),
    sort_choices=True,
)


WEBSITES = CatalogConfig(
    name="websites",
    title="Our Websites",
    noun="websites",
    endpoint="websites/listing",
    response_key="websites",
    page_size=CARD_PAGE_SIZE,
    filters=(CLIENT_FILTER, TECHNOLOGY_FILTER),
    fixed_params={"type": "WEBSITE"},
    date_field="launch_date",
    missing_date_text="No launch date",
    detail_endpoint="websites/{id}",
)

LANDING_PAGES = CatalogConfig(
    name="landing-pages",
    title="Our Landing Pages",
    noun="landing pages",
    endpoint="websites/listing",
    response_key="websites",
    page_size=CARD_PAGE_SIZE,
    filters=(CLIENT_FILTER, TECHNOLOGY_FILTER),
    fixed_params={"type": "LANDING_PAGE"},
    date_field="launch_date",
    missing_date_text="No launch date",
    detail_endpoint="websites/{id}",
)

REELS = CatalogConfig(
    name="reels",
    title="Our Reels",
    noun="reels",
    endpoint="videos/listing",
    response_key="videos",
    page_size=VIDEO_PAGE_SIZE,
    filters=(CLIENT_FILTER, FORMAT_FILTER),
    fixed_params={"type": "REEL"},
    search_placeholder="Search by tags",
)

CORPORATE_VIDEOS = CatalogConfig(
    name="corporate-videos",
    title="Our Corporate Videos",
    noun="corporate videos",
    endpoint="videos/listing",
    response_key="videos",
    page_size=VIDEO_PAGE_SIZE,
    filters=(CLIENT_FILTER, FORMAT_FILTER),
    fixed_params={"type": "CORPORATE_VIDEO"},
    search_placeholder="Search by tags",
)

CREATIVES = CatalogConfig(
    name="creatives",
    title="Our Creatives",
    noun="creatives",
    endpoint="creatives/listing",
    response_key="creatives",
    page_size=CARD_PAGE_SIZE,
    filters=(CREATIVE_TYPE_FILTER,),
    search_placeholder="Search by name",
    title_field="name",
    thumbnail_url_field="thumbnail_public_url",
    subtitle_field="type",
    link_field="file_public_url",
    detail_endpoint="creatives/{id}",
)

CATALOGS: Dict[str, CatalogConfig] = {
    catalog.name: catalog
    for catalog in (WEBSITES, LANDING_PAGES, REELS, CORPORATE_VIDEOS, CREATIVES)
}


def get_catalog(name: str) -> CatalogConfig:
    try:
        return CATALOGS[name]
    except KeyError:
        known = ", ".join(sorted(CATALOGS))
        raise UnknownCatalogError(f"Unknown catalog '{name}'. Known catalogs: {known}") from None


__all__ = [
    "CATALOGS",
    "CatalogConfig",
    "FilterSpec",
    "get_catalog",
]
