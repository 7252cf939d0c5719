"""Tests for ImageFetcher."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from showcase.config import IMAGE_FETCH_TIMEOUT
from showcase.errors import ApiError
from showcase.infrastructure.api.images import ImageFetcher


def _response(status=200, content=b""):
    response = Mock()
    response.status_code = status
    response.ok = status < 400
    response.content = content
    return response


class TestImageFetcher:
    def test_http_url_uses_session(self):
        session = Mock()
        session.get.return_value = _response(content=b"\x89PNG")
        fetcher = ImageFetcher(session=session)

        assert fetcher.fetch("https://cdn.x.com/a.jpg") == b"\x89PNG"
        session.get.assert_called_once_with("https://cdn.x.com/a.jpg", timeout=IMAGE_FETCH_TIMEOUT)

    def test_http_status_maps_to_api_error(self):
        session = Mock()
        session.get.return_value = _response(status=404)

        with pytest.raises(ApiError) as excinfo:
            ImageFetcher(session=session).fetch("http://cdn.x.com/missing.jpg")
        assert excinfo.value.status_code == 404

    def test_connection_error_maps_to_api_error(self):
        session = Mock()
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ApiError, match="refused"):
            ImageFetcher(session=session).fetch("http://cdn.x.com/a.jpg")

    def test_local_path_and_file_url(self, tmp_path):
        image = tmp_path / "placeholder.jpg"
        image.write_bytes(b"jpeg-bytes")
        fetcher = ImageFetcher(session=Mock())

        assert fetcher.fetch(str(image)) == b"jpeg-bytes"
        assert fetcher.fetch(f"file://{image}") == b"jpeg-bytes"

    def test_missing_local_file_maps_to_api_error(self, tmp_path):
        with pytest.raises(ApiError, match="Could not read image"):
            ImageFetcher(session=Mock()).fetch(str(tmp_path / "nope.jpg"))

    def test_close_closes_session(self):
        session = Mock()
        ImageFetcher(session=session).close()
        session.close.assert_called_once_with()
