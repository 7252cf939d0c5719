"""Tests for thumbnail URL resolution."""

import pytest

from showcase.application.services.thumbnails import resolve_thumbnail_url


@pytest.mark.parametrize(
    "thumbnail, resolved, base, expected",
    [
        ("a.jpg", "https://cdn.example.com/r.jpg", "https://img.example.com", "https://cdn.example.com/r.jpg"),
        (None, None, "https://img.example.com", "/placeholder.jpg"),
        ("", None, None, "/placeholder.jpg"),
        ("https://other.example.com/x.jpg", None, "https://img.example.com", "https://other.example.com/x.jpg"),
        ("HTTP://other.example.com/x.jpg", None, None, "HTTP://other.example.com/x.jpg"),
        ("uploads/x.jpg", None, "https://img.example.com/", "https://img.example.com/uploads/x.jpg"),
        ("/uploads/x.jpg", None, "https://img.example.com", "https://img.example.com/uploads/x.jpg"),
        ("uploads/x.jpg", None, None, "/uploads/x.jpg"),
        ("/uploads/x.jpg", None, None, "/uploads/x.jpg"),
    ],
)
def test_resolution_order(thumbnail, resolved, base, expected):
    assert resolve_thumbnail_url(thumbnail, resolved, base) == expected


def test_custom_placeholder():
    assert resolve_thumbnail_url(None, placeholder="/static/none.png") == "/static/none.png"


def test_ftp_is_not_absolute():
    assert resolve_thumbnail_url("ftp://host/x.jpg", base_url="https://img") == "https://img/ftp://host/x.jpg"
