"""Tests for x-axis numeric coercion."""

from datetime import date, datetime, timezone

import pytest

from chart_engine.coercion import extract_xy, to_number

NEW_YEAR_2024_MS = 1704067200000.0


def test_numbers_pass_through():
    """Test ints and floats are returned as floats."""
    assert to_number(5) == 5.0
    assert to_number(-2.5) == -2.5


def test_datetime_to_epoch_ms():
    """Test aware and naive datetimes become epoch milliseconds."""
    assert to_number(datetime(2024, 1, 1, tzinfo=timezone.utc)) == NEW_YEAR_2024_MS
    assert to_number(datetime(2024, 1, 1)) == NEW_YEAR_2024_MS


def test_date_to_epoch_ms():
    """Test plain dates map to midnight UTC."""
    assert to_number(date(2024, 1, 1)) == NEW_YEAR_2024_MS


@pytest.mark.parametrize("text", [
    "2024-01-01T00:00:00Z",
    "2024-01-01T00:00:00+00:00",
    "2024-01-01",
])
def test_iso_strings(text):
    """Test ISO-8601 strings are parsed as dates."""
    assert to_number(text) == NEW_YEAR_2024_MS


@pytest.mark.parametrize("text,expected", [
    ("42", 42.0),
    ("12.5kPa", 12.5),
    ("-3e2", -300.0),
    ("  7.25 ", 7.25),
])
def test_numeric_strings(text, expected):
    """Test non-date strings fall back to a leading float."""
    assert to_number(text) == expected


@pytest.mark.parametrize("value", ["abc", "", "nan", None, True, False, float("nan"), float("inf"), object()])
def test_unparseable_values_become_zero(value):
    """Test coercion is total and degrades to 0."""
    assert to_number(value) == 0.0


def test_extract_xy():
    """Test a series is coerced into parallel lists."""
    series = [{"x": 1, "y": 2}, {"x": "3", "y": 4.5, "tag": "a"}]
    xs, ys = extract_xy(series)

    assert xs == [1.0, 3.0]
    assert ys == [2.0, 4.5]
