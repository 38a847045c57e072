from __future__ import annotations

import json
from pathlib import Path

import pytest

from fxcatalog.errors import SettingsLoadError, SettingsValidationError
from fxcatalog.settings.manager import SettingsManager, default_settings_path


def test_settings_manager_roundtrip(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert settings_path.exists()
    assert manager.get("local_catalog_dir") is None

    changes = []
    manager.settings_changed.connect(lambda key, value: changes.append((key, value)))
    catalog_dir = tmp_path / "catalog"
    manager.set("local_catalog_dir", catalog_dir)

    assert changes == [("local_catalog_dir", str(catalog_dir))]
    assert manager.get("local_catalog_dir") == str(catalog_dir)
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["local_catalog_dir"] == str(catalog_dir)


def test_settings_manager_nested_updates_preserve_defaults(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    manager.set_tab_preference("music", "group_by", "duration")

    prefs = manager.tab_preferences("music")
    assert prefs["group_by"] == "duration"
    assert prefs["sort_by"] == "name"
    assert manager.tab_preferences("effects")["group_by"] == "none"


def test_settings_manager_merges_partial_file(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"browser": {"tabs": {"filters": {"sort_order": "desc"}}}, "favorites": {"effects": ["a", "a"]}}),
        encoding="utf-8",
    )
    manager = SettingsManager(path=settings_path)
    manager.load()

    assert manager.get("browser.tabs.filters.sort_order") == "desc"
    assert manager.get("browser.tabs.filters.view_mode") == "grid"
    assert manager.get("favorites.effects") == ["a"]
    assert manager.get("browser.active_tab") == "effects"


def test_invalid_value_is_rejected(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()

    with pytest.raises(SettingsValidationError):
        manager.set("browser.active_tab", "shaders")
    assert manager.get("browser.active_tab") == "effects"


def test_corrupt_file_raises_load_error(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{broken", encoding="utf-8")

    with pytest.raises(SettingsLoadError):
        SettingsManager(path=settings_path).load()


def test_invalid_file_raises_validation_error(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"schema": "other@2"}), encoding="utf-8")

    with pytest.raises(SettingsValidationError):
        SettingsManager(path=settings_path).load()


def test_toggle_favorite(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()

    assert manager.toggle_favorite("effects", "blur") is True
    assert manager.is_favorite("effects", "blur")
    assert manager.toggle_favorite("effects", "blur") is False
    assert not manager.is_favorite("effects", "blur")


def test_get_missing_key_returns_default(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    assert manager.get("browser.tabs.nope.sort_by", "fallback") == "fallback"


def test_default_path_honours_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("FXCATALOG_SETTINGS", str(tmp_path / "custom.json"))
    assert default_settings_path() == tmp_path / "custom.json"
    assert SettingsManager().path == tmp_path / "custom.json"
