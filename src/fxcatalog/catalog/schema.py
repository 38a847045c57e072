"""JSON schema for catalog payload records."""

from __future__ import annotations

from typing import Any, Iterable

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..errors import CatalogValidationError

_LOCALIZED = {
    "type": "object",
    "additionalProperties": {"type": "string"},
}

RECORD_SCHEMA: dict[str, Any] = {
    "$id": "fxcatalog/resource.schema.json",
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "name": {"type": "string"},
        "category": {"type": "string"},
        "complexity": {"enum": ["basic", "intermediate", "advanced"]},
        "tags": {"type": "array", "items": {"type": "string"}},
        "labels": _LOCALIZED,
        "description": {"anyOf": [_LOCALIZED, {"type": "string"}]},
        "ffmpegCommand": {"type": "string"},
        "cssFilter": {"type": "string"},
        "params": {"type": "object"},
    },
    "additionalProperties": True,
}

CATALOG_SCHEMA: dict[str, Any] = {
    "$id": "fxcatalog/catalog.schema.json",
    "type": "array",
    "items": RECORD_SCHEMA,
}

_validator = Draft202012Validator(CATALOG_SCHEMA)


def validate_records(records: Any, origin: str = "catalog") -> list[dict[str, Any]]:
    """Validate an array of catalog records and reject duplicate ids."""

    errors = sorted(_validator.iter_errors(records), key=lambda err: list(err.path))
    if errors:
        first: ValidationError = errors[0]
        location = "/".join(str(part) for part in first.path) or "<root>"
        raise CatalogValidationError(f"{origin}: {location}: {first.message}")

    _reject_duplicates(records, origin)
    return list(records)


def _reject_duplicates(records: Iterable[dict[str, Any]], origin: str) -> None:
    seen: set[str] = set()
    for record in records:
        if record["id"] in seen:
            raise CatalogValidationError(f"{origin}: duplicate id {record['id']!r}")
        seen.add(record["id"])


__all__ = ["CATALOG_SCHEMA", "RECORD_SCHEMA", "validate_records"]
