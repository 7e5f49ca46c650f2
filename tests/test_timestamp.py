"""Tests for logpretty/timestamp.py"""

from datetime import datetime, timedelta, timezone

from logpretty.timestamp import format_clock, parse_rfc3339


class TestParseRfc3339:
    def test_utc_with_millis(self):
        dt = parse_rfc3339("2018-03-30T17:35:28.992Z")
        assert dt == datetime(2018, 3, 30, 17, 35, 28, 992000, tzinfo=timezone.utc)

    def test_without_fraction(self):
        assert parse_rfc3339("2018-03-30T17:35:28Z").microsecond == 0

    def test_keeps_offset(self):
        dt = parse_rfc3339("2018-03-30T17:35:28-05:30")
        assert dt.utcoffset() == -timedelta(hours=5, minutes=30)
        assert dt.hour == 17

    def test_nanoseconds_truncated(self):
        assert parse_rfc3339("2018-03-30T17:35:28.123456789Z").microsecond == 123456

    def test_lowercase_separators(self):
        assert parse_rfc3339("2018-03-30t17:35:28z") is not None

    def test_rejects_non_strings(self):
        for value in (None, 1522431328, ["2018-03-30T17:35:28Z"]):
            assert parse_rfc3339(value) is None

    def test_rejects_other_formats(self):
        for value in (
            "2018-03-30",
            "2018-03-30 17:35:28Z",
            "2018-03-30T17:35:28",
            "17:35:28.992",
            "2018-03-30T17:35:28Z\n",
            "",
        ):
            assert parse_rfc3339(value) is None

    def test_rejects_out_of_range(self):
        for value in (
            "2018-13-30T17:35:28Z",
            "2018-02-30T17:35:28Z",
            "2018-03-30T24:00:00Z",
            "2018-03-30T17:35:60Z",
            "2018-03-30T17:35:28+24:00",
            "2018-03-30T17:35:28+01:60",
        ):
            assert parse_rfc3339(value) is None


class TestFormatClock:
    def test_millis_zero_padded(self):
        assert format_clock(datetime(2018, 3, 30, 7, 5, 8, 2000)) == "[07:05:08.002]"

    def test_millis_truncated(self):
        assert format_clock(datetime(2018, 3, 30, 17, 35, 28, 999999)) == "[17:35:28.999]"

    def test_no_timezone_conversion(self):
        tz = timezone(timedelta(hours=9))
        assert format_clock(datetime(2018, 3, 30, 23, 0, 0, tzinfo=tz)) == "[23:00:00.000]"
