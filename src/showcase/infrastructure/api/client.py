"""HTTP client for the portfolio API.

Thin wrapper around a ``requests.Session`` that joins paths onto the
configured base URL, drops unset query parameters, sends the no-store cache
header and maps every failure onto :class:`~showcase.errors.ApiError` or
:class:`~showcase.errors.MalformedResponseError`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from showcase.config import DEFAULT_API_BASE_URL, NO_STORE_HEADERS
from showcase.errors import ApiError, MalformedResponseError

LOGGER = logging.getLogger(__name__)


class ApiClient:
    """GET-only JSON client bound to a single API base URL."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = (base_url or DEFAULT_API_BASE_URL).rstrip("/")
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Issue a GET request and return the decoded JSON body."""
        url = self.url_for(path)
        query = {key: value for key, value in (params or {}).items() if value is not None}
        LOGGER.debug("GET %s params=%s", url, query)
        try:
            response = self._session.get(url, params=query, headers=dict(NO_STORE_HEADERS))
        except requests.exceptions.RequestException as exc:
            raise ApiError(f"Request to {url} failed: {exc}") from exc

        if not response.ok:
            raise ApiError(
                f"Request to {url} failed with status {response.status_code}",
                status_code=response.status_code,
                payload=_safe_json(response),
            )

        try:
            return response.json()
        except ValueError as exc:
            snippet = (response.text or "")[:200]
            raise MalformedResponseError(
                f"Response from {url} is not valid JSON: {snippet!r}"
            ) from exc

    def close(self) -> None:
        self._session.close()


def _safe_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


__all__ = ["ApiClient"]
