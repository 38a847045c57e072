"""Ready-made query accessors over catalog :class:`Resource` objects."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from ..domain.models import Resource
from .buckets import (
    get_complexity_order,
    get_date_group,
    get_duration_group,
    get_screens_group,
    get_size_group,
    to_datetime,
)
from .parsers import parse_duration, parse_file_size


def resource_searchable_text(resource: Resource) -> List[str]:
    return resource.searchable_text()


def resource_matches_filter(resource: Resource, filter_type: str) -> bool:
    """A filter value matches the complexity, the category or any tag."""
    return (
        resource.complexity == filter_type
        or resource.category == filter_type
        or filter_type in resource.tags
    )


def _created_at(resource: Resource) -> Any:
    return resource.extra.get("created_at") or resource.extra.get("createdAt")


def get_resource_sort_value(resource: Resource, sort_by: str) -> Any:
    if sort_by == "name":
        return resource.label()
    if sort_by == "complexity":
        return get_complexity_order(resource.complexity)
    if sort_by == "category":
        return resource.category or None
    if sort_by == "duration":
        raw = resource.extra.get("duration")
        return None if raw is None else parse_duration(raw)
    if sort_by == "size":
        raw = resource.extra.get("size")
        return None if raw is None else parse_file_size(raw)
    if sort_by == "date":
        created = _created_at(resource)
        moment = to_datetime(created) if created is not None else None
        return moment.timestamp() if moment is not None else None
    if sort_by == "id":
        return resource.id
    return resource.extra.get(sort_by)


def get_resource_group_value(
    resource: Resource,
    group_by: str,
    now: Optional[datetime] = None,
) -> Any:
    if group_by == "category":
        return resource.category
    if group_by == "complexity":
        return resource.complexity
    if group_by == "tags":
        return min(resource.tags) if resource.tags else None
    if group_by == "duration":
        return get_duration_group(parse_duration(resource.extra.get("duration")))
    if group_by == "size":
        return get_size_group(parse_file_size(resource.extra.get("size")))
    if group_by == "screens":
        screens = resource.extra.get("screens")
        return get_screens_group(screens) if isinstance(screens, (int, float)) else None
    if group_by == "date":
        created = _created_at(resource)
        return get_date_group(created, now=now) if created is not None else None
    value = resource.extra.get(group_by)
    return value if isinstance(value, str) else None
