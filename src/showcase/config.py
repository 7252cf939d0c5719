"""Default configuration values for Showcase."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional

DEFAULT_API_BASE_URL: Final[str] = "http://localhost:5000/api"

# Every listing request carries this header so intermediate caches never serve
# a stale page after the catalog changes server-side.
NO_STORE_HEADERS: Final[dict[str, str]] = {"Cache-Control": "no-store"}

# Cards without a thumbnail fall back to this root-relative path.
PLACEHOLDER_THUMBNAIL: Final[str] = "/placeholder.jpg"

# Page sizes used by the listing endpoints.
CARD_PAGE_SIZE: Final[int] = 6
VIDEO_PAGE_SIZE: Final[int] = 10

# Reference lists (clients, technologies) are fetched in a single request with
# a ceiling high enough to be treated as "fetch all".
REFERENCE_PAGE_LIMIT: Final[int] = 100

# Fraction of the sentinel that must be inside the viewport before the next
# page is requested.
VISIBILITY_THRESHOLD: Final[float] = 0.1

# Thumbnail downloads use a pool separate from the listing fetches.
IMAGE_FETCH_TIMEOUT: Final[float] = 10.0
THUMBNAIL_THREADS: Final[int] = 4

SEARCH_FILTER_KEY: Final[str] = "search"

# ---------------------------------------------------------------------------
# UI constants
# ---------------------------------------------------------------------------

CARD_WIDTH: Final[int] = 280
CARD_THUMBNAIL_HEIGHT: Final[int] = 150
SENTINEL_HEIGHT: Final[int] = 40
THUMBNAIL_SIZE: Final[tuple[int, int]] = (CARD_WIDTH - 16, CARD_THUMBNAIL_HEIGHT)
WINDOW_DEFAULT_SIZE: Final[tuple[int, int]] = (1100, 780)


@dataclass(frozen=True)
class ShowcaseConfig:
    """Explicit endpoint configuration handed to controllers and clients."""

    api_base_url: str = DEFAULT_API_BASE_URL
    image_base_url: Optional[str] = None
    placeholder_thumbnail: str = PLACEHOLDER_THUMBNAIL
