"""
Tests for date parsing.
"""

import pytest
from datetime import datetime

from sla_monitor.pipeline.dates import parse_date, build_calendar_value


def test_parse_day_month_year():
    """Slash dates are read as day/month/year."""
    parsed = parse_date("25/12/2024")
    assert parsed == datetime(2024, 12, 25)
    assert parsed.month - 1 == 11


def test_parse_single_digit_parts():
    """Day and month need no zero padding."""
    assert parse_date("5/1/2024") == datetime(2024, 1, 5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("32/01/2024", datetime(2024, 2, 1)),   # day overflow rolls into next month
        ("0/03/2024", datetime(2024, 2, 29)),   # day 0 is the last day of the previous month
        ("01/13/2024", datetime(2025, 1, 1)),   # month overflow rolls into next year
        ("15/0/2024", datetime(2023, 12, 15)),  # month 0 is December of the previous year
    ],
)
def test_out_of_range_parts_roll_over(text, expected):
    """Out-of-range day/month values are normalized, not rejected."""
    assert parse_date(text) == expected


def test_two_digit_year_maps_to_1900s():
    """Years 0-99 are read as 1900-1999."""
    assert parse_date("1/1/24") == datetime(1924, 1, 1)


def test_iso_dates():
    """ISO-8601 text goes through generic parsing."""
    assert parse_date("2024-01-05") == datetime(2024, 1, 5)
    assert parse_date("2024-01-05T10:30:00") == datetime(2024, 1, 5, 10, 30)


def test_timezone_aware_values_become_naive_utc():
    """Offsets are applied and dropped so values stay comparable."""
    assert parse_date("2024-01-05T10:00:00Z") == datetime(2024, 1, 5, 10, 0)
    assert parse_date("2024-01-05T10:00:00+07:00") == datetime(2024, 1, 5, 3, 0)


def test_textual_month_formats():
    """A few common textual formats are accepted."""
    assert parse_date("5 January 2024") == datetime(2024, 1, 5)
    assert parse_date("Jan 5, 2024") == datetime(2024, 1, 5)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "aa/bb/cc", "1/1/99999", "2024-13-45"])
def test_invalid_input_returns_none(value):
    """Invalid input yields None and never raises."""
    assert parse_date(value) is None


def test_non_string_input():
    """Datetimes pass through; other values are parsed as their text."""
    assert parse_date(datetime(2024, 1, 5, 8)) == datetime(2024, 1, 5, 8)
    assert parse_date(12) is None


def test_build_calendar_value_out_of_range():
    """Unrepresentable dates give None."""
    assert build_calendar_value(10000, 0, 1) is None
    assert build_calendar_value(2024, 0, 1) == datetime(2024, 1, 1)


@pytest.mark.parametrize(
    "text",
    [
        "1" * 5000 + "/1/2024",
        "1/" + "1" * 5000 + "/2024",
        "1/1/" + "9" * 5000,
        "9" * 300 + "/1/2024",
    ],
)
def test_oversized_parts_return_none(text):
    """Parts too long to be a calendar value give None instead of raising."""
    assert parse_date(text) is None
