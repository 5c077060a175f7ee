"""Unit tests for jmesplus.core — duration text, reference-time layouts
and semantic-version ranges.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from semver import Version

from jmesplus.core.durations import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
    format_duration,
    parse_duration,
)
from jmesplus.core.layouts import RFC3339, parse_time
from jmesplus.core.semver_range import parse_range


def _epoch_ns(*args: int, tz: timezone = timezone.utc) -> int:
    return int(datetime(*args, tzinfo=tz).timestamp()) * 1_000_000_000


# ===========================================================================
# Durations
# ===========================================================================


class TestParseDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("1h30m", HOUR + 30 * MINUTE),
            ("1.5h", HOUR + 30 * MINUTE),
            ("300ms", 300 * MILLISECOND),
            ("1us", MICROSECOND),
            ("1µs", MICROSECOND),
            ("2ns", 2),
            ("+5s", 5 * SECOND),
            ("-2m", -2 * MINUTE),
            (".5s", 500 * MILLISECOND),
            ("1h1m1s", HOUR + MINUTE + SECOND),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "-", "10", "1x", ".s", "h", "1h30", "abc"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_duration(text)


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("nanoseconds", "expected"),
        [
            (0, "0s"),
            (1, "1ns"),
            (1500, "1.5µs"),
            (1_500_000, "1.5ms"),
            (100 * MILLISECOND, "100ms"),
            (SECOND, "1s"),
            (1500 * MILLISECOND, "1.5s"),
            (90 * SECOND, "1m30s"),
            (HOUR, "1h0m0s"),
            (HOUR + 30 * MINUTE, "1h30m0s"),
            (26 * HOUR + 3 * MINUTE, "26h3m0s"),
            (-MINUTE, "-1m0s"),
            (-30 * MINUTE, "-30m0s"),
        ],
    )
    def test_format(self, nanoseconds: int, expected: str) -> None:
        assert format_duration(nanoseconds) == expected

    def test_parses_its_own_output(self) -> None:
        value = 3 * HOUR + 7 * MINUTE + 250 * MILLISECOND
        assert parse_duration(format_duration(value)) == value


# ===========================================================================
# Layouts
# ===========================================================================


class TestParseTime:
    def test_rfc3339_epoch(self) -> None:
        assert parse_time(RFC3339, "1970-01-01T00:00:00Z") == 0

    def test_rfc3339_offset(self) -> None:
        assert parse_time(RFC3339, "1970-01-01T01:00:00+01:00") == 0

    def test_rfc3339_fractional_seconds_accepted(self) -> None:
        assert parse_time(RFC3339, "1970-01-01T00:00:01.5Z") == 1_500_000_000

    def test_rfc3339_nanosecond_precision(self) -> None:
        assert parse_time(RFC3339, "1970-01-01T00:00:00.000000001Z") == 1

    def test_rfc3339_rejects_date_only(self) -> None:
        with pytest.raises(ValueError):
            parse_time(RFC3339, "2023-01-01")

    def test_rfc3339_rejects_trailing_text(self) -> None:
        with pytest.raises(ValueError):
            parse_time(RFC3339, "2023-01-01T00:00:00Z extra")

    def test_date_layout(self) -> None:
        assert parse_time("2006-01-02", "2024-02-29") == _epoch_ns(2024, 2, 29)

    def test_impossible_date(self) -> None:
        with pytest.raises(ValueError):
            parse_time("2006-01-02", "2023-02-30")

    def test_month_names_and_twelve_hour_clock(self) -> None:
        layout = "Jan 2, 2006 at 3:04pm (MST)"
        assert parse_time(layout, "Feb 3, 2013 at 7:54pm (PST)") == _epoch_ns(2013, 2, 3, 19, 54)

    def test_midnight_am(self) -> None:
        assert parse_time("2006-01-02 3:04PM", "2020-05-01 12:00AM") == _epoch_ns(2020, 5, 1)

    def test_two_digit_year_and_numeric_offset(self) -> None:
        value = parse_time("02 Jan 06 15:04 -0700", "03 Feb 13 19:54 -0800")
        assert value == _epoch_ns(2013, 2, 4, 3, 54)

    def test_full_month_name(self) -> None:
        assert parse_time("January 2 2006", "March 7 2021") == _epoch_ns(2021, 3, 7)

    def test_explicit_fraction(self) -> None:
        assert parse_time("15:04:05.000", "00:00:01.250") - parse_time("15:04:05", "00:00:01") == (
            250 * MILLISECOND
        )


# ===========================================================================
# Semver ranges
# ===========================================================================


def _v(text: str) -> Version:
    return Version.parse(text)


class TestParseRange:
    def test_and_range(self) -> None:
        version_range = parse_range(">=1.0.0 <2.0.0")
        assert _v("1.2.3") in version_range
        assert _v("2.0.0") not in version_range
        assert _v("0.9.9") not in version_range

    def test_or_range(self) -> None:
        version_range = parse_range("<1.0.0 || >=2.0.0")
        assert _v("0.5.0") in version_range
        assert _v("1.5.0") not in version_range
        assert _v("2.1.0") in version_range

    def test_bare_version_is_equality(self) -> None:
        assert _v("1.2.3") in parse_range("1.2.3")
        assert _v("1.2.4") not in parse_range("1.2.3")

    def test_not_equal(self) -> None:
        assert _v("1.2.3") not in parse_range("!=1.2.3")
        assert _v("1.2.4") in parse_range("!=1.2.3")

    def test_operator_separated_by_space(self) -> None:
        assert _v("1.0.0") in parse_range(">= 1.0.0")

    def test_major_wildcard(self) -> None:
        version_range = parse_range("1.x")
        assert _v("1.9.9") in version_range
        assert _v("2.0.0") not in version_range

    def test_minor_wildcard(self) -> None:
        version_range = parse_range("1.2.*")
        assert _v("1.2.9") in version_range
        assert _v("1.3.0") not in version_range

    def test_greater_than_wildcard(self) -> None:
        assert _v("1.9.0") not in parse_range(">1.x")
        assert _v("2.0.0") in parse_range(">1.x")

    def test_full_wildcard(self) -> None:
        assert _v("0.0.1") in parse_range("*")

    def test_prerelease_sorts_before_release(self) -> None:
        assert _v("1.0.0-alpha") not in parse_range(">=1.0.0")

    @pytest.mark.parametrize("text", ["", ">=1.0", ">=a.x", "1.x.3", ">=", "||"])
    def test_invalid_ranges(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_range(text)
