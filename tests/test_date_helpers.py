from datetime import date, datetime, timedelta, timezone

import pytest

from kakeibo.utils.date_helpers import (
    add_months,
    combine_with_time,
    format_display_date,
    format_display_timestamp,
    friendly_month,
    month_of,
    parse_date,
    parse_display_date,
    parse_month,
    parse_timestamp,
    to_iso_timestamp,
)


class TestTimestamps:
    def test_iso_timestamp_keeps_offset_and_milliseconds(self):
        value = datetime(2024, 5, 15, 12, 0, 0, 123456, tzinfo=timezone(timedelta(hours=9)))

        stamp = to_iso_timestamp(value)

        assert ".123" in stamp
        assert parse_timestamp(stamp) == value.replace(microsecond=123000)

    def test_parse_accepts_z_suffix(self):
        parsed = parse_timestamp("2024-05-01T00:00:00.000Z")

        assert parsed == datetime(2024, 5, 1, tzinfo=timezone.utc)
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize("value", ["", None, "yesterday", "2024-13-01T00:00:00Z"])
    def test_parse_rejects_garbage(self, value):
        assert parse_timestamp(value) is None

    def test_month_of_is_local(self, tokyo_tz):
        assert month_of("2024-04-30T15:00:00Z") == "2024-05"
        assert month_of("2024-04-30T14:59:59Z") == "2024-04"
        assert month_of("garbage") is None

    def test_combine_with_time(self):
        at = datetime(2024, 5, 15, 18, 45, 30)

        combined = combine_with_time(date(2024, 4, 2), at)

        assert (combined.year, combined.month, combined.day) == (2024, 4, 2)
        assert (combined.hour, combined.minute, combined.second) == (18, 45, 30)
        assert combined.tzinfo is not None


class TestMonths:
    @pytest.mark.parametrize("start, n, expected", [
        (date(2024, 5, 15), -1, date(2024, 4, 15)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 12, 1), 1, date(2025, 1, 1)),
        (date(2024, 3, 31), -13, date(2023, 2, 28)),
    ])
    def test_add_months(self, start, n, expected):
        assert add_months(start, n) == expected

    def test_parse_month(self):
        assert parse_month("2024-05") == date(2024, 5, 1)
        assert parse_month("May") is None

    def test_friendly_month(self):
        assert friendly_month("2026-02") == "February 2026"
        assert friendly_month("bogus") == "bogus"


class TestDisplayDates:
    def test_parse_date_accepts_common_separators(self):
        assert parse_date("2024-05-15") == date(2024, 5, 15)
        assert parse_date("2024/05/15") == date(2024, 5, 15)
        assert parse_date("15 May") is None

    def test_format_display_date(self):
        assert format_display_date("2024-05-15", "DD.MM.YYYY") == "15.05.2024"
        assert format_display_date("not-a-date") == "not-a-date"

    def test_format_display_timestamp(self, tokyo_tz):
        assert format_display_timestamp("2024-04-30T16:00:00Z", "YYYY-MM-DD") == "2024-05-01"
        assert format_display_timestamp("bad") == "bad"

    def test_parse_display_date_falls_back_to_iso(self):
        assert parse_display_date("05/15/2024", "MM/DD/YYYY") == date(2024, 5, 15)
        assert parse_display_date("2024-05-15", "MM/DD/YYYY") == date(2024, 5, 15)
        assert parse_display_date("", "MM/DD/YYYY") is None
