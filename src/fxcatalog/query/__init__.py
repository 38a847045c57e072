from .accessors import (
    get_resource_group_value,
    get_resource_sort_value,
    resource_matches_filter,
    resource_searchable_text,
)
from .buckets import (
    get_complexity_order,
    get_date_group,
    get_duration_group,
    get_screens_group,
    get_size_group,
)
from .engine import FilterOptions, ItemGroup, compare_values, filter_items, group_items, sort_items
from .parsers import parse_duration, parse_file_size

__all__ = [
    "FilterOptions",
    "ItemGroup",
    "compare_values",
    "filter_items",
    "get_complexity_order",
    "get_date_group",
    "get_duration_group",
    "get_resource_group_value",
    "get_resource_sort_value",
    "get_screens_group",
    "get_size_group",
    "group_items",
    "parse_duration",
    "parse_file_size",
    "resource_matches_filter",
    "resource_searchable_text",
    "sort_items",
]
