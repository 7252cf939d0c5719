"""Tests for CatalogPageLoader: request building and response parsing."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from showcase.application.services.paginated_loader import CatalogPageLoader, PageResult
from showcase.domain.catalogs import CREATIVES, LANDING_PAGES, REELS, WEBSITES
from showcase.errors import ApiError, DetailsUnavailableError, MalformedResponseError


# ---------------------------------------------------------------------------
# PageResult
# ---------------------------------------------------------------------------


class TestPageResult:
    def test_has_more_true(self):
        assert PageResult(items=[], page=1, page_size=6, total_count=13).has_more is True

    def test_has_more_false_at_last_page(self):
        assert PageResult(items=[], page=3, page_size=6, total_count=13).has_more is False

    def test_has_more_false_on_exact_boundary(self):
        assert PageResult(items=[], page=2, page_size=6, total_count=12).has_more is False


# ---------------------------------------------------------------------------
# fetch_page
# ---------------------------------------------------------------------------


def _client(body):
    client = Mock()
    client.get = Mock(return_value=body)
    return client


class TestFetchPage:
    def test_builds_listing_request(self):
        client = _client({"data": {"websites": [], "total": 0}})
        loader = CatalogPageLoader(client, LANDING_PAGES)
        state = LANDING_PAGES.initial_state().with_filter("technology_id", "7")

        loader.fetch_page(state)

        client.get.assert_called_once_with(
            "websites/listing",
            {"page": 1, "limit": 6, "keyword": "", "type": "LANDING_PAGE", "technology_id": 7},
        )

    def test_parses_items_and_total(self):
        body = {
            "data": {
                "videos": [
                    {"id": 1, "title": "Launch reel", "thumbnail": "a.jpg", "created_at": "2024-01-02"},
                    {"id": 2, "title": "Teaser", "thumbnail": None},
                ],
                "total": 42,
            }
        }
        result = CatalogPageLoader(_client(body), REELS).fetch_page(REELS.initial_state())

        assert [item.title for item in result.items] == ["Launch reel", "Teaser"]
        assert result.items[0].thumbnail == "a.jpg"
        assert result.items[0].date == "2024-01-02"
        assert result.items[1].thumbnail is None
        assert result.total_count == 42
        assert result.page_size == 10

    def test_total_falls_back_to_item_count(self):
        body = {"data": {"websites": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]}}
        result = CatalogPageLoader(_client(body), WEBSITES).fetch_page(WEBSITES.initial_state())
        assert result.total_count == 2

    def test_zero_total_falls_back_to_item_count(self):
        body = {"data": {"websites": [{"id": 1, "title": "A"}], "total": 0}}
        result = CatalogPageLoader(_client(body), WEBSITES).fetch_page(WEBSITES.initial_state())
        assert result.total_count == 1

    def test_bare_list_body(self):
        body = [{"id": 3, "title": "Bare"}]
        result = CatalogPageLoader(_client(body), WEBSITES).fetch_page(WEBSITES.initial_state())
        assert [item.id for item in result.items] == [3]
        assert result.total_count == 1

    def test_unexpected_body_yields_empty_page(self):
        result = CatalogPageLoader(_client({"message": "ok"}), WEBSITES).fetch_page(
            WEBSITES.initial_state()
        )
        assert result.items == []
        assert result.total_count == 0

    def test_creative_fields(self):
        body = {
            "data": {
                "creatives": [
                    {
                        "id": 5,
                        "name": "Spring brochure",
                        "type": "BROCHURE",
                        "thumbnail_public_url": "https://cdn.example.com/t.jpg",
                        "file_public_url": "https://cdn.example.com/f.pdf",
                    }
                ],
                "total": 1,
            }
        }
        item = CatalogPageLoader(_client(body), CREATIVES).fetch_page(
            CREATIVES.initial_state()
        ).items[0]
        assert item.title == "Spring brochure"
        assert item.subtitle == "BROCHURE"
        assert item.thumbnail_url == "https://cdn.example.com/t.jpg"
        assert item.link == "https://cdn.example.com/f.pdf"

    def test_malformed_items_raise(self):
        body = {"data": {"websites": {"id": 1}}}
        with pytest.raises(MalformedResponseError):
            CatalogPageLoader(_client(body), WEBSITES).fetch_page(WEBSITES.initial_state())

    def test_client_errors_propagate(self):
        client = Mock()
        client.get.side_effect = ApiError("down")
        with pytest.raises(ApiError):
            CatalogPageLoader(client, WEBSITES).fetch_page(WEBSITES.initial_state())


# ---------------------------------------------------------------------------
# fetch_details
# ---------------------------------------------------------------------------


class TestFetchDetails:
    def test_unwraps_data_block(self):
        client = _client({"data": {"id": 4, "title": "Site"}})
        record = CatalogPageLoader(client, WEBSITES).fetch_details(4)
        client.get.assert_called_once_with("websites/4")
        assert record == {"id": 4, "title": "Site"}

    def test_returns_plain_body(self):
        client = _client({"id": 9, "name": "Logo"})
        assert CatalogPageLoader(client, CREATIVES).fetch_details("9") == {"id": 9, "name": "Logo"}

    def test_catalog_without_detail_endpoint(self):
        with pytest.raises(DetailsUnavailableError):
            CatalogPageLoader(_client({}), REELS).fetch_details(1)
