"""Tests for clock normalization and trip-day helpers."""

from datetime import date, datetime

import pytest

from tripplanner.utils.time_format import (
    DAY_COLORS,
    combine_date_time,
    day_color_index,
    day_index,
    day_number,
    format_time_24,
    normalize_optional_time,
)


class TestFormatTime24:
    @pytest.mark.parametrize("raw,expected", [
        ("9:05 PM", "21:05"),
        ("12:30 AM", "00:30"),
        ("12:15 PM", "12:15"),
        ("7:15", "07:15"),
        ("08:00", "08:00"),
        ("11:45 am", "11:45"),
    ])
    def test_normalizes_clock_strings(self, raw, expected):
        assert format_time_24(raw) == expected

    def test_empty_input(self):
        assert format_time_24("") == ""
        assert format_time_24(None) == ""

    def test_garbage_is_returned_untouched(self):
        assert format_time_24("noonish") == "noonish"

    def test_optional_time_blank_becomes_none(self):
        assert normalize_optional_time("  ") is None
        assert normalize_optional_time(None) is None
        assert normalize_optional_time("9:00 PM") == "21:00"


class TestCombineDateTime:
    def test_missing_time_sorts_at_midnight(self):
        assert combine_date_time(date(2025, 7, 1), None) == datetime(2025, 7, 1, 0, 0)

    def test_with_time(self):
        assert combine_date_time(date(2025, 7, 1), "14:30") == datetime(2025, 7, 1, 14, 30)

    def test_invalid_time_treated_as_missing(self):
        assert combine_date_time(date(2025, 7, 1), "25:99") == datetime(2025, 7, 1, 0, 0)


class TestDayHelpers:
    def test_first_day(self):
        start = date(2025, 7, 1)
        assert day_index(start, start) == 0
        assert day_number(start, start) == 1
        assert day_color_index(start, start) == 0

    def test_palette_wraps_after_eight_days(self):
        start = date(2025, 7, 1)
        assert day_number(start, date(2025, 7, 9)) == 9
        assert day_color_index(start, date(2025, 7, 9)) == 0
        assert day_color_index(start, date(2025, 7, 10)) == 1

    def test_day_before_start_stays_in_palette(self):
        start = date(2025, 7, 1)
        index = day_color_index(start, date(2025, 6, 30))
        assert index == 7
        assert DAY_COLORS[index]
