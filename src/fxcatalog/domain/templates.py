"""Templated command strings.

Catalog entries keep their ``ffmpegCommand`` / ``cssFilter`` templates as
plain strings; callers render them with :func:`render_template` when they
actually need a command line.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def placeholders(template: str) -> list[str]:
    """Return the placeholder names of *template* in first-seen order."""

    seen: list[str] = []
    for name in PLACEHOLDER_RE.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def is_template(value: Any) -> bool:
    return isinstance(value, str) and PLACEHOLDER_RE.search(value) is not None


def _to_str(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def render_template(template: str, params: Mapping[str, Any]) -> str:
    """Substitute each ``{key}`` with ``params[key]``.

    Placeholders without a matching key are left untouched so a partially
    parametrised command is still recognisable.
    """

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key in params:
            return _to_str(params[key])
        return match.group(0)

    return PLACEHOLDER_RE.sub(_replace, template)


__all__ = ["PLACEHOLDER_RE", "is_template", "placeholders", "render_template"]
