from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Mapping

from showcase.config import SEARCH_FILTER_KEY


@dataclass(frozen=True)
class FilterState:
    """Immutable search/filter/pagination parameters driving a listing fetch.

    Every filter update goes through :meth:`with_filter`, which resets the
    page to 1; only :meth:`next_page` moves the page forward.
    """

    limit: int
    page: int = 1
    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")
        if self.page < 1:
            raise ValueError(f"page must be positive, got {self.page}")

    @classmethod
    def initial(cls, limit: int, keys: Iterable[str]) -> "FilterState":
        """Default state: page 1, empty search and empty selectors."""
        values: Dict[str, str] = {SEARCH_FILTER_KEY: ""}
        for key in keys:
            values[key] = ""
        return cls(limit=limit, page=1, values=values)

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)

    def has_key(self, key: str) -> bool:
        return key in self.values

    @property
    def search(self) -> str:
        return self.get(SEARCH_FILTER_KEY)

    def with_filter(self, key: str, value: str) -> "FilterState":
        updated = dict(self.values)
        updated[key] = value if value is not None else ""
        return replace(self, values=updated, page=1)

    def next_page(self) -> "FilterState":
        return replace(self, page=self.page + 1)

    def has_more(self, total: int) -> bool:
        return self.page * self.limit < total

    def is_exhausted(self, total: int) -> bool:
        return not self.has_more(total)
