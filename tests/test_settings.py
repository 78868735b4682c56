"""Tests for the YAML-backed settings manager."""

from pathlib import Path

import pytest
import yaml

from confform.config import CONFIG_FILE_NAME, DEFAULT_SETTINGS, SettingsManager
from confform.exceptions import SettingsError


def test_defaults_without_file(settings_manager):
    assert settings_manager.list_settings() == DEFAULT_SETTINGS
    assert settings_manager.get("escape") is True


def test_set_persists_to_yaml(settings_manager):
    settings_manager.set("assets_path", "/srv/assets")

    stored = yaml.safe_load(settings_manager.settings_file.read_text())
    assert stored == {"assets_path": "/srv/assets"}
    assert SettingsManager(settings_manager.settings_dir).get("assets_path") == "/srv/assets"


def test_boolean_coercion(settings_manager):
    settings_manager.set("escape", "off")
    assert settings_manager.get("escape") is False

    settings_manager.set("escape", "Yes")
    assert settings_manager.get("escape") is True


def test_invalid_boolean(settings_manager):
    with pytest.raises(SettingsError):
        settings_manager.set("escape", "maybe")


def test_unknown_key(settings_manager):
    with pytest.raises(SettingsError):
        settings_manager.get("colour")
    with pytest.raises(SettingsError):
        settings_manager.set("colour", "red")


def test_unset(settings_manager):
    settings_manager.set("assets_path", "x")

    assert settings_manager.unset("assets_path") is True
    assert settings_manager.unset("assets_path") is False
    assert settings_manager.get("assets_path") == ""


def test_corrupt_file_falls_back_to_defaults(settings_manager):
    settings_manager.settings_dir.mkdir(parents=True)
    settings_manager.settings_file.write_text("{not: [valid yaml")

    assert settings_manager.list_settings() == DEFAULT_SETTINGS


def test_non_mapping_file_falls_back_to_defaults(settings_manager):
    settings_manager.settings_dir.mkdir(parents=True)
    settings_manager.settings_file.write_text("- a\n- b\n")

    assert settings_manager.get("escape") is True


def test_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("CONFFORM_CONFIG", str(tmp_path / "envdir"))

    manager = SettingsManager()

    assert manager.settings_dir == (tmp_path / "envdir").resolve()


def test_resolve_config_path_order(settings_manager, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert settings_manager.resolve_config_path() == tmp_path / CONFIG_FILE_NAME

    settings_manager.set("config_path", "/etc/custom.cfg")
    assert settings_manager.resolve_config_path() == Path("/etc/custom.cfg")

    assert settings_manager.resolve_config_path("local.cfg") == Path("local.cfg")
