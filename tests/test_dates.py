"""Tests for display date formatting."""

from datetime import datetime, timezone

import pytest

from showcase.utils.dates import format_display_date


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-03-15", "15/03/2024"),
        ("2024-03-15T10:30:00", "15/03/2024"),
        ("2023-12-01T00:00:00.000", "01/12/2023"),
    ],
)
def test_formats_iso_dates(value, expected):
    assert format_display_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-45"])
def test_invalid_values_give_empty_string(value):
    assert format_display_date(value) == ""


def test_aware_timestamp_uses_local_calendar_day():
    value = "2024-03-15T12:00:00Z"
    expected = datetime(2024, 3, 15, 12, tzinfo=timezone.utc).astimezone().strftime("%d/%m/%Y")
    assert format_display_date(value) == expected
