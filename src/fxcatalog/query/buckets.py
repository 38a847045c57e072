"""Bucketizers mapping raw magnitudes to human-readable group keys.

All functions return canonical English keys. A translation layer may
re-label them for display; grouping and sorting always work on the keys.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import MO, relativedelta

# Values below this are epoch seconds, otherwise epoch milliseconds.
EPOCH_MS_THRESHOLD = 10_000_000_000

MIB = 1024 ** 2
GIB = 1024 ** 3

UNGROUPED = "Ungrouped"
NONE_BUCKET = "none"

DURATION_BUCKETS = (
    (30, "<30s"),
    (60, "30s-1m"),
    (180, "1-3m"),
    (300, "3-5m"),
    (600, "5-10m"),
    (1800, "10-30m"),
    (3600, "30m-1h"),
    (7200, "1-2h"),
)
DURATION_OVERFLOW = "2h+"

SIZE_BUCKETS = (
    (MIB, "<1MB"),
    (10 * MIB, "1-10MB"),
    (50 * MIB, "10-50MB"),
    (100 * MIB, "50-100MB"),
    (500 * MIB, "100-500MB"),
    (GIB, "500MB-1GB"),
    (5 * GIB, "1-5GB"),
)
SIZE_OVERFLOW = "5GB+"

# Upper bounds are inclusive for screen counts.
SCREEN_BUCKETS = (
    (1, "1"),
    (2, "2"),
    (4, "3-4"),
    (6, "5-6"),
    (9, "7-9"),
    (12, "10-12"),
    (16, "13-16"),
)
SCREENS_OVERFLOW = "16+"

COMPLEXITY_ORDER = {"basic": 0, "intermediate": 1, "advanced": 2}

DateLike = Union[int, float, str, datetime, date]


def to_datetime(value: DateLike) -> Optional[datetime]:
    """Coerce an epoch (seconds or ms), ISO string, date or datetime."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        seconds = value if abs(value) < EPOCH_MS_THRESHOLD else value / 1000
        return datetime.fromtimestamp(seconds)
    if isinstance(value, str) and value.strip():
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    return None


def get_date_group(value: DateLike, now: Optional[datetime] = None) -> str:
    moment = to_datetime(value)
    if moment is None:
        return UNGROUPED
    now = now or datetime.now()
    if moment.tzinfo is not None and now.tzinfo is None:
        moment = moment.astimezone().replace(tzinfo=None)

    day = moment.date()
    today = now.date()
    week_start = today + relativedelta(weekday=MO(-1))
    last_week_start = week_start - relativedelta(weeks=1)

    if day >= today:
        return "Today"
    if day == today - relativedelta(days=1):
        return "Yesterday"
    if day >= week_start:
        return "This week"
    if day >= last_week_start:
        return "Last week"
    if (day.year, day.month) == (today.year, today.month):
        return "This month"
    if day.year == today.year:
        return moment.strftime("%B %Y")
    return str(day.year)


def get_duration_group(seconds: float) -> str:
    if seconds is None or seconds <= 0:
        return NONE_BUCKET
    for upper, label in DURATION_BUCKETS:
        if seconds < upper:
            return label
    return DURATION_OVERFLOW


def get_size_group(size: float) -> str:
    if size is None or size <= 0:
        return NONE_BUCKET
    for upper, label in SIZE_BUCKETS:
        if size < upper:
            return label
    return SIZE_OVERFLOW


def get_screens_group(count: float) -> str:
    if count is None or count <= 0:
        return NONE_BUCKET
    for upper, label in SCREEN_BUCKETS:
        if count <= upper:
            return label
    return SCREENS_OVERFLOW


def get_complexity_order(complexity: Any) -> int:
    return COMPLEXITY_ORDER.get(complexity, 0) if isinstance(complexity, str) else 0
