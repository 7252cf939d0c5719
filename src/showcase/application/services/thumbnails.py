"""Thumbnail URL resolution for catalog cards."""

from __future__ import annotations

import re
from typing import Optional

from showcase.config import PLACEHOLDER_THUMBNAIL

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


def resolve_thumbnail_url(
    thumbnail: Optional[str],
    resolved_url: Optional[str] = None,
    base_url: Optional[str] = None,
    placeholder: str = PLACEHOLDER_THUMBNAIL,
) -> str:
    """Return the URL a card should load its thumbnail from.

    The order matters: a URL the API already resolved always wins over
    anything rebuilt from the raw ``thumbnail`` field.
    """
    if resolved_url:
        return resolved_url
    if not thumbnail:
        return placeholder
    if _ABSOLUTE_URL.match(thumbnail):
        return thumbnail
    if base_url:
        return f"{base_url.rstrip('/')}/{thumbnail.lstrip('/')}"
    return f"/{thumbnail.lstrip('/')}"


__all__ = ["resolve_thumbnail_url"]
