"""Tests for bucketizers and the duration / file-size parsers."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from fxcatalog.query.buckets import (
    GIB,
    MIB,
    get_complexity_order,
    get_date_group,
    get_duration_group,
    get_screens_group,
    get_size_group,
    to_datetime,
)
from fxcatalog.query.parsers import parse_duration, parse_file_size

# Wednesday
NOW = datetime(2024, 5, 15, 12, 0, 0)


# ---------------------------------------------------------------------------
# parse_duration
# ---------------------------------------------------------------------------


class TestParseDuration:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (42, 42.0),
            (1.5, 1.5),
            ("90", 90.0),
            ("1:30", 90.0),
            ("1:02:03", 3723.0),
            ("12:", 720.0),
            (":30", 30.0),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", "abc", "1:x", "1:2:3:4", None, [1]])
    def test_invalid_is_zero(self, value):
        assert parse_duration(value) == 0


# ---------------------------------------------------------------------------
# parse_file_size
# ---------------------------------------------------------------------------


class TestParseFileSize:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (2048, 2048.0),
            ("100", 100.0),
            ("100 B", 100.0),
            ("1.5 KB", 1536.0),
            ("2mb", 2 * 1024 ** 2),
            (" 3 GB ", 3 * 1024 ** 3),
            ("1TB", 1024 ** 4),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_file_size(value) == expected

    @pytest.mark.parametrize("value", ["abc", "1..2 MB", "", None, "12 PB"])
    def test_invalid_is_zero(self, value):
        assert parse_file_size(value) == 0


# ---------------------------------------------------------------------------
# Date groups
# ---------------------------------------------------------------------------


class TestDateGroup:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (datetime(2024, 5, 15, 8), "Today"),
            (datetime(2024, 5, 14, 23), "Yesterday"),
            (datetime(2024, 5, 13, 9), "This week"),
            (datetime(2024, 5, 12, 9), "Last week"),
            (datetime(2024, 5, 6), "Last week"),
            (datetime(2024, 5, 2), "This month"),
            (datetime(2024, 2, 10), "February 2024"),
            (datetime(2023, 12, 31), "2023"),
        ],
    )
    def test_groups(self, value, expected):
        assert get_date_group(value, now=NOW) == expected

    def test_future_is_today(self):
        assert get_date_group(datetime(2024, 6, 1), now=NOW) == "Today"

    def test_epoch_seconds_and_milliseconds(self):
        moment = datetime(2024, 5, 15, 8).timestamp()
        assert get_date_group(moment, now=NOW) == "Today"
        assert get_date_group(moment * 1000, now=NOW) == "Today"

    def test_iso_string(self):
        assert get_date_group("2024-05-14T10:00:00", now=NOW) == "Yesterday"

    def test_date_object(self):
        assert get_date_group(date(2024, 5, 15), now=NOW) == "Today"

    def test_aware_value_against_naive_now(self):
        value = datetime(2020, 1, 1, 12, tzinfo=timezone.utc)
        assert get_date_group(value, now=NOW) == "2020"

    @pytest.mark.parametrize("value", ["not a date", "", None, True])
    def test_unparseable_is_ungrouped(self, value):
        assert get_date_group(value, now=NOW) == "Ungrouped"

    def test_to_datetime_passthrough(self):
        assert to_datetime(NOW) is NOW


# ---------------------------------------------------------------------------
# Magnitude buckets
# ---------------------------------------------------------------------------


class TestMagnitudeBuckets:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "none"), (-5, "none"), (29, "<30s"), (30, "30s-1m"), (200, "3-5m"), (7199, "1-2h"), (7200, "2h+")],
    )
    def test_duration(self, seconds, expected):
        assert get_duration_group(seconds) == expected

    @pytest.mark.parametrize(
        "size, expected",
        [(0, "none"), (500, "<1MB"), (MIB, "1-10MB"), (60 * MIB, "50-100MB"), (2 * GIB, "1-5GB"), (6 * GIB, "5GB+")],
    )
    def test_size(self, size, expected):
        assert get_size_group(size) == expected

    @pytest.mark.parametrize(
        "count, expected",
        [(0, "none"), (1, "1"), (2, "2"), (3, "3-4"), (6, "5-6"), (12, "10-12"), (16, "13-16"), (17, "16+")],
    )
    def test_screens(self, count, expected):
        assert get_screens_group(count) == expected

    def test_complexity_order(self):
        assert get_complexity_order("basic") < get_complexity_order("intermediate") < get_complexity_order("advanced")
        assert get_complexity_order("unknown") == 0
        assert get_complexity_order(None) == 0
