"""Schema helpers for the browser preferences file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_LOCALE

RESOURCE_TABS = ["effects", "filters", "transitions", "templates", "music", "subtitles"]

_TAB_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "sort_by": {"type": "string"},
        "sort_order": {"enum": ["asc", "desc"]},
        "group_by": {"type": "string"},
        "filter_type": {"type": "string"},
        "view_mode": {"enum": ["list", "grid", "thumbnails"]},
        "show_favorites_only": {"type": "boolean"},
    },
    "additionalProperties": True,
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "fxcatalog/settings.schema.json",
    "type": "object",
    "required": ["schema", "browser", "favorites"],
    "properties": {
        "schema": {"const": "fxcatalog/settings@1"},
        "local_catalog_dir": {"type": ["string", "null"]},
        "locale": {"type": "string"},
        "browser": {
            "type": "object",
            "properties": {
                "active_tab": {"enum": RESOURCE_TABS},
                "tabs": {
                    "type": "object",
                    "additionalProperties": _TAB_SCHEMA,
                },
            },
            "additionalProperties": True,
        },
        "favorites": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
    },
    "additionalProperties": True,
}

DEFAULT_TAB: dict[str, Any] = {
    "sort_by": "name",
    "sort_order": "asc",
    "group_by": "none",
    "filter_type": "all",
    "view_mode": "grid",
    "show_favorites_only": False,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "fxcatalog/settings@1",
    "local_catalog_dir": None,
    "locale": DEFAULT_LOCALE,
    "browser": {
        "active_tab": "effects",
        "tabs": {tab: deepcopy(DEFAULT_TAB) for tab in RESOURCE_TABS},
    },
    "favorites": {tab: [] for tab in RESOURCE_TABS},
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def _dedupe(entries: list[Any]) -> list[str]:
    seen: list[str] = []
    for entry in entries:
        text = str(entry)
        if text not in seen:
            seen.append(text)
    return seen


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "browser" and isinstance(value, dict):
                target = merged["browser"]
                for sub_key, sub_value in value.items():
                    if sub_key == "tabs" and isinstance(sub_value, dict):
                        for tab, prefs in sub_value.items():
                            if isinstance(prefs, dict):
                                target["tabs"].setdefault(tab, deepcopy(DEFAULT_TAB)).update(prefs)
                        continue
                    target[sub_key] = sub_value
                continue
            if key == "favorites" and isinstance(value, dict):
                for tab, ids in value.items():
                    if isinstance(ids, list):
                        merged["favorites"][tab] = _dedupe(ids)
                continue
            if key == "local_catalog_dir" and value not in {None, ""}:
                try:
                    merged[key] = os.fspath(value)
                except TypeError:
                    continue
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "DEFAULT_TAB", "RESOURCE_TABS", "SETTINGS_SCHEMA", "merge_with_defaults"]
