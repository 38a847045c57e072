"""Settings file management with validation and change notifications."""

from __future__ import annotations

import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any

from jsonschema.exceptions import ValidationError

from ..config import ENV_SETTINGS_PATH
from ..errors import SettingsLoadError, SettingsValidationError
from ..events.signal import Signal
from ..utils.jsonio import read_json, write_json
from .schema import DEFAULT_SETTINGS, DEFAULT_TAB, merge_with_defaults


def default_settings_path() -> Path:
    """Return the default settings.json location for the current platform."""

    override = os.environ.get(ENV_SETTINGS_PATH)
    if override:
        return Path(override).expanduser()
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "fxcatalog" / "settings.json"
        return Path.home() / "AppData" / "Roaming" / "fxcatalog" / "settings.json"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "fxcatalog" / "settings.json"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "fxcatalog" / "settings.json"
    return Path.home() / ".config" / "fxcatalog" / "settings.json"


class SettingsManager:
    """Load, validate and persist browser preferences.

    ``settings_changed`` is emitted with ``(key, value)`` after every
    successful :meth:`set`.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
        self.settings_changed = Signal("settings_changed")

    @property
    def path(self) -> Path:
        return self._path or default_settings_path()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Load the settings JSON from disk, creating defaults if missing."""

        path = self.path
        self._path = path
        if path.exists():
            try:
                payload = read_json(path)
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(str(exc)) from exc
        else:
            payload = None
        try:
            self._data = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value for *key*, supporting dotted access for nested keys."""

        target = self._data
        parts = key.split(".")
        for index, part in enumerate(parts):
            if not isinstance(target, dict) or part not in target:
                return default
            value = target[part]
            if index == len(parts) - 1:
                return value
            target = value
        return default

    def set(self, key: str, value: Any) -> None:
        """Update *key* with *value* and persist the change."""

        if isinstance(value, Path):
            value = str(value)

        candidate = deepcopy(self._data)
        parts = key.split(".")
        target: dict[str, Any] = candidate
        for part in parts[:-1]:
            branch = target.get(part)
            if not isinstance(branch, dict):
                branch = {}
                target[part] = branch
            target = branch
        target[parts[-1]] = value
        try:
            self._data = merge_with_defaults(candidate)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        self._write()
        self.settings_changed.emit(key, value)

    # ------------------------------------------------------------------
    # Browser helpers
    # ------------------------------------------------------------------
    def tab_preferences(self, tab: str) -> dict[str, Any]:
        prefs = deepcopy(DEFAULT_TAB)
        prefs.update(self.get(f"browser.tabs.{tab}", {}) or {})
        return prefs

    def set_tab_preference(self, tab: str, name: str, value: Any) -> None:
        self.set(f"browser.tabs.{tab}.{name}", value)

    def is_favorite(self, tab: str, resource_id: str) -> bool:
        return resource_id in (self.get(f"favorites.{tab}", []) or [])

    def toggle_favorite(self, tab: str, resource_id: str) -> bool:
        favorites = list(self.get(f"favorites.{tab}", []) or [])
        if resource_id in favorites:
            favorites.remove(resource_id)
        else:
            favorites.append(resource_id)
        self.set(f"favorites.{tab}", favorites)
        return resource_id in favorites

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _write(self) -> None:
        path = self.path
        self._path = path
        write_json(path, self._data)


__all__ = ["SettingsManager", "default_settings_path"]
