"""Parsers turning free-form duration and size values into seconds and bytes."""

from __future__ import annotations

import math
import re
from typing import Any

_SIZE_RE = re.compile(r"^([\d.]+)\s*([KMGT]?B)?$", re.IGNORECASE)
_UNIT_POWER = {"B": 0, "KB": 1, "MB": 2, "GB": 3, "TB": 4}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(text: str) -> float | None:
    """Mirror of a lenient number cast: blank strings are zero, junk is None."""

    text = text.strip()
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_duration(value: Any) -> float:
    """Return *value* in seconds.

    Numbers pass through. ``"HH:MM:SS"`` and ``"MM:SS"`` are split on colons;
    an empty component counts as zero, so ``"12:"`` is twelve minutes and
    ``":30"`` is thirty seconds. Plain numeric strings are read as seconds and
    anything else yields ``0``.
    """

    if _is_number(value):
        return float(value)
    if not isinstance(value, str) or not value.strip():
        return 0.0

    if ":" in value:
        parts = [_to_float(part) for part in value.split(":")]
        if any(part is None for part in parts):
            return 0.0
        if len(parts) == 3:
            hours, minutes, seconds = parts
            return hours * 3600 + minutes * 60 + seconds
        if len(parts) == 2:
            minutes, seconds = parts
            return minutes * 60 + seconds
        return 0.0

    number = _to_float(value)
    return number if number is not None else 0.0


def parse_file_size(value: Any) -> float:
    """Return *value* in bytes; ``"1.5 KB"`` is ``1536``."""

    if _is_number(value):
        return float(value)
    if not isinstance(value, str):
        return 0.0

    text = value.strip()
    match = _SIZE_RE.match(text)
    if match:
        number = _to_float(match.group(1))
        if number is None:
            return 0.0
        unit = (match.group(2) or "B").upper()
        return number * 1024 ** _UNIT_POWER[unit]

    number = _to_float(text) if text else None
    return number if number is not None else 0.0


__all__ = ["parse_duration", "parse_file_size"]
