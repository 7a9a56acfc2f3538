"""
Tests for time parsing and countdown formatting functions.
"""

from datetime import datetime, timedelta, timezone

import pytest

from claude_usage_status.utils.time import (
    format_duration,
    format_time_until_reset,
    parse_reset_time,
)


class TestParseResetTime:
    """Tests for parse_reset_time function."""

    def test_zulu_format(self):
        result = parse_reset_time("2026-01-09T15:00:00Z")
        assert result == datetime(2026, 1, 9, 15, 0, tzinfo=timezone.utc)

    def test_offset_format(self):
        result = parse_reset_time("2026-01-09T17:00:00+02:00")
        assert result == datetime(2026, 1, 9, 15, 0, tzinfo=timezone.utc)

    def test_negative_offset_with_fraction(self):
        result = parse_reset_time("2026-01-09T10:00:00.999-05:00")
        assert result == datetime(2026, 1, 9, 15, 0, tzinfo=timezone.utc)

    def test_with_microseconds(self):
        result = parse_reset_time("2026-01-09T15:00:00.123456+00:00")
        assert result.hour == 15
        assert result.minute == 0

    def test_with_nanoseconds(self):
        result = parse_reset_time("2026-01-09T15:00:00.123456789Z")
        assert result.hour == 15

    def test_lowercase_separators(self):
        result = parse_reset_time("2026-01-09t15:00:00z")
        assert result == datetime(2026, 1, 9, 15, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-date",
            "",
            "2026-01-09",
            "2026-01-09T15:00:00",
            "15:00:00Z",
            "2026-13-40T99:00:00Z",
            "2026-01-09T15Z",
            "20260109T150000Z",
            "2026-01-09T15:00Z",
            " 2026-01-09T15:00:00Z",
            "2026-01-09T15:00:00Z ",
            "2026-01-09T15:00:00Z\n",
            "2026-01-09 15:00:00Z",
            "2026-01-09T15:00:00+0000",
            "2026-01-09T15:00:00.Z",
        ],
    )
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            parse_reset_time(value)


class TestFormatDuration:
    """Tests for format_duration function."""

    def test_hours_and_minutes(self):
        assert format_duration(timedelta(hours=2, minutes=15)) == "2h15m"

    def test_hours_only(self):
        assert format_duration(timedelta(hours=3)) == "3h"

    def test_minutes_only(self):
        assert format_duration(timedelta(minutes=45)) == "45m"

    def test_single_digit_minutes_not_padded(self):
        assert format_duration(timedelta(hours=1, minutes=5)) == "1h5m"

    def test_sub_minute(self):
        assert format_duration(timedelta(seconds=59)) == "now"

    def test_zero(self):
        assert format_duration(timedelta(0)) == "now"

    def test_negative(self):
        assert format_duration(timedelta(minutes=-5)) == "now"

    def test_truncates_not_rounds(self):
        assert format_duration(timedelta(hours=2, minutes=59, seconds=59)) == "2h59m"
        assert format_duration(timedelta(minutes=1, seconds=59)) == "1m"

    def test_multi_day(self):
        assert format_duration(timedelta(days=2, hours=1, minutes=30)) == "49h30m"


class TestFormatTimeUntilReset:
    """Tests for format_time_until_reset function."""

    def test_future(self, fixed_now):
        assert format_time_until_reset("2026-01-09T15:00:00Z", fixed_now) == "2h15m"

    def test_past(self, fixed_now):
        assert format_time_until_reset("2026-01-09T10:00:00Z", fixed_now) == "now"

    def test_exactly_now(self, fixed_now):
        assert format_time_until_reset("2026-01-09T12:45:00Z", fixed_now) == "now"

    def test_unparseable(self, fixed_now):
        assert format_time_until_reset("not-a-date", fixed_now) == "unknown"

    def test_empty(self, fixed_now):
        assert format_time_until_reset("", fixed_now) == "unknown"

    def test_none(self, fixed_now):
        assert format_time_until_reset(None, fixed_now) == "unknown"

    def test_defaults_to_current_time(self):
        future = datetime.now(timezone.utc) + timedelta(hours=2, minutes=30, seconds=30)
        result = format_time_until_reset(future.isoformat())
        assert result in ("2h30m", "2h29m")

    def test_naive_now_taken_as_utc(self):
        assert format_time_until_reset("2026-01-09T15:00:00Z", datetime(2026, 1, 9, 12, 45)) == "2h15m"

    @pytest.mark.parametrize(
        "value",
        ["2026-01-09T15Z", "20260109T150000Z", "2026-01-09T15:00Z", " 2026-01-09T15:00:00Z"],
    )
    def test_non_rfc3339_is_unknown(self, value, fixed_now):
        assert format_time_until_reset(value, fixed_now) == "unknown"
