"""Tests for the JSON settings manager."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from showcase.config import ShowcaseConfig
from showcase.errors import SettingsLoadError, SettingsValidationError
from showcase.settings.manager import SettingsManager, default_settings_path
from showcase.settings.schema import DEFAULT_SETTINGS, merge_with_defaults


def test_load_creates_defaults(settings_path: Path):
    manager = SettingsManager(settings_path)
    manager.load()

    assert settings_path.exists()
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["api_base_url"] == "http://localhost:5000/api"
    assert manager.get("ui.window_width") == 1100


def test_load_merges_existing_values(settings_path: Path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(
        json.dumps({"api_base_url": "https://api.example.com", "ui": {"last_catalog": "reels"}}),
        encoding="utf-8",
    )
    manager = SettingsManager(settings_path)
    manager.load()

    assert manager.get("api_base_url") == "https://api.example.com"
    assert manager.get("ui.last_catalog") == "reels"
    assert manager.get("ui.window_height") == 780


def test_corrupt_file_raises_load_error(settings_path: Path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SettingsLoadError):
        SettingsManager(settings_path).load()


def test_invalid_values_raise_validation_error(settings_path: Path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(json.dumps({"api_base_url": "ftp://nope"}), encoding="utf-8")
    with pytest.raises(SettingsValidationError):
        SettingsManager(settings_path).load()


def test_non_object_file_raises_validation_error(settings_path: Path):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SettingsValidationError):
        SettingsManager(settings_path).load()


def test_set_persists_and_emits(settings_path: Path, qapp_instance):
    manager = SettingsManager(settings_path)
    manager.load()
    changes = []
    manager.settingsChanged.connect(lambda key, value: changes.append((key, value)))

    manager.set("ui.last_catalog", "creatives")

    assert changes == [("ui.last_catalog", "creatives")]
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["ui"]["last_catalog"] == "creatives"


def test_set_rejects_invalid_value(settings_path: Path):
    manager = SettingsManager(settings_path)
    manager.load()
    with pytest.raises(SettingsValidationError):
        manager.set("log_level", "CHATTY")
    assert manager.get("log_level") == "WARNING"


def test_get_missing_key_returns_default(settings_path: Path):
    manager = SettingsManager(settings_path)
    manager.load()
    assert manager.get("ui.unknown", "fallback") == "fallback"
    assert manager.get("api_base_url.deeper") is None


def test_to_config(settings_path: Path):
    manager = SettingsManager(settings_path)
    manager.load()
    manager.set("image_base_url", "")
    assert manager.to_config() == ShowcaseConfig()

    manager.set("image_base_url", "https://img.example.com")
    assert manager.to_config().image_base_url == "https://img.example.com"


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout is Linux only")
def test_default_path_honours_xdg(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_settings_path() == tmp_path / "showcase" / "settings.json"


def test_merge_with_defaults_does_not_mutate_defaults():
    merged = merge_with_defaults({"ui": {"window_width": 2000}})
    assert merged["ui"]["window_width"] == 2000
    assert DEFAULT_SETTINGS["ui"]["window_width"] == 1100
