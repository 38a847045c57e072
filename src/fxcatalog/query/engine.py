"""Generic filter / sort / group operators.

The operators never mutate their input and know nothing about concrete
resource kinds: callers pass accessor functions that extract the
searchable text, sort values and group keys from their items.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from .buckets import UNGROUPED

T = TypeVar("T")

_DIGITS_RE = re.compile(r"(\d+)")


@dataclass
class FilterOptions:
    search_query: str = ""
    show_favorites_only: bool = False
    filter_type: Optional[str] = "all"


@dataclass
class ItemGroup(Generic[T]):
    title: str
    items: List[T] = field(default_factory=list)


def _natural_key(text: str) -> tuple:
    parts = []
    for chunk in _DIGITS_RE.split(text):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk.casefold()))
    return tuple(parts)


def natural_compare(a: str, b: str) -> int:
    """Numeric-aware, case-insensitive comparison ("Item 2" < "Item 10").

    Strings equal under that rule are tie-broken with lower case first.
    """

    key_a, key_b = _natural_key(a), _natural_key(b)
    if key_a != key_b:
        return -1 if key_a < key_b else 1
    tie_a, tie_b = a.swapcase(), b.swapcase()
    if tie_a == tie_b:
        return 0
    return -1 if tie_a < tie_b else 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> int:
    """Compare two defined values: strings naturally, numbers numerically,
    anything else by their string forms."""

    if isinstance(a, str) and isinstance(b, str):
        return natural_compare(a, b)
    if _is_number(a) and _is_number(b):
        diff = a - b
        return 0 if diff == 0 else (-1 if diff < 0 else 1)
    return natural_compare(str(a), str(b))


def filter_items(
    items: Sequence[T],
    options: FilterOptions,
    get_searchable_text: Callable[[T], Iterable[Optional[str]]],
    matches_filter: Optional[Callable[[T, str], bool]] = None,
    is_favorite: Optional[Callable[[T], bool]] = None,
) -> List[T]:
    result = list(items)

    query = (options.search_query or "").strip().lower()
    if query:
        result = [
            item for item in result
            if any(text and query in text.lower() for text in get_searchable_text(item))
        ]

    if options.show_favorites_only and is_favorite is not None:
        result = [item for item in result if is_favorite(item)]

    filter_type = options.filter_type
    if filter_type and filter_type != "all" and matches_filter is not None:
        result = [item for item in result if matches_filter(item, filter_type)]

    return result


def sort_items(
    items: Sequence[T],
    sort_by: str,
    order: str,
    get_value: Callable[[T, str], Any],
) -> List[T]:
    """Return a sorted copy of *items*.

    Missing values (``None``) go last for ``"asc"`` and first for ``"desc"``.
    """

    descending = order == "desc"

    def _cmp(left: T, right: T) -> int:
        a, b = get_value(left, sort_by), get_value(right, sort_by)
        if a is None and b is None:
            return 0
        if a is None:
            return -1 if descending else 1
        if b is None:
            return 1 if descending else -1
        result = compare_values(a, b)
        return -result if descending else result

    return sorted(items, key=cmp_to_key(_cmp))


def group_items(
    items: Sequence[T],
    group_by: Optional[str],
    get_value: Callable[[T, str], Any],
    order: str = "asc",
) -> List[ItemGroup[T]]:
    if not group_by or group_by == "none":
        return [ItemGroup(title="", items=list(items))]

    buckets: dict[str, List[T]] = {}
    for item in items:
        key = get_value(item, group_by) or UNGROUPED
        buckets.setdefault(str(key), []).append(item)

    ungrouped = buckets.pop(UNGROUPED, None)
    titles = sorted(buckets, key=cmp_to_key(compare_values), reverse=order == "desc")
    groups = [ItemGroup(title=title, items=buckets[title]) for title in titles]
    if ungrouped is not None:
        groups.append(ItemGroup(title=UNGROUPED, items=ungrouped))
    return groups


__all__ = [
    "FilterOptions",
    "ItemGroup",
    "compare_values",
    "filter_items",
    "group_items",
    "natural_compare",
    "sort_items",
]
