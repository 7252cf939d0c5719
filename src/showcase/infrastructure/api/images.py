"""Raw image downloads for card thumbnails."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import requests

from showcase.config import IMAGE_FETCH_TIMEOUT
from showcase.errors import ApiError

LOGGER = logging.getLogger(__name__)

_HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)
_FILE_URL = re.compile(r"^file://", re.IGNORECASE)


class ImageFetcher:
    """Return image bytes for http(s) URLs or local file paths."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = IMAGE_FETCH_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch(self, url: str) -> bytes:
        if _HTTP_URL.match(url):
            return self._download(url)
        path = Path(_FILE_URL.sub("", url))
        try:
            return path.read_bytes()
        except OSError as exc:
            raise ApiError(f"Could not read image {url}: {exc}") from exc

    def _download(self, url: str) -> bytes:
        LOGGER.debug("GET image %s", url)
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.exceptions.RequestException as exc:
            raise ApiError(f"Image request to {url} failed: {exc}") from exc
        if not response.ok:
            raise ApiError(
                f"Image request to {url} failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return response.content

    def close(self) -> None:
        self._session.close()


__all__ = ["ImageFetcher"]
