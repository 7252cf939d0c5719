"""Core records shown by the catalog pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class SelectOption:
    """One entry of a categorical selector; an empty value means "no filter"."""

    value: str
    label: str


@dataclass
class Item:
    """A single catalog entry (website, video, creative...)."""

    id: Any
    title: str = ""
    thumbnail: Optional[str] = None
    thumbnail_url: Optional[str] = None
    date: Optional[str] = None
    subtitle: Optional[str] = None
    link: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        *,
        title_field: str = "title",
        date_field: Optional[str] = None,
        thumbnail_url_field: Optional[str] = None,
        subtitle_field: Optional[str] = None,
        link_field: Optional[str] = None,
    ) -> "Item":
        """Build an item from a raw API record using the catalog's field names."""

        def _text(name: Optional[str]) -> Optional[str]:
            if not name:
                return None
            value = record.get(name)
            if value is None or value == "":
                return None
            return str(value)

        return cls(
            id=record.get("id"),
            title=str(record.get(title_field) or ""),
            thumbnail=_text("thumbnail"),
            thumbnail_url=_text(thumbnail_url_field),
            date=_text(date_field),
            subtitle=_text(subtitle_field),
            link=_text(link_field),
            raw=dict(record),
        )
