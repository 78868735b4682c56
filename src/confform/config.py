"""Settings management for confform."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from confform.exceptions import SettingsError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "uncrustify.cfg"

DEFAULT_SETTINGS: dict[str, Any] = {
    "config_path": None,
    "assets_path": "",
    "escape": True,
}


class SettingsManager:
    """Manages tool settings stored in YAML format."""

    def __init__(self, settings_dir: Path | None = None) -> None:
        if settings_dir is None:
            # Check for environment variable override
            env_dir = os.getenv("CONFFORM_CONFIG")
            if env_dir:
                settings_dir = Path(env_dir).expanduser().resolve()
            else:
                # Default to ~/.confform
                settings_dir = Path.home() / ".confform"

        self.settings_dir = settings_dir
        self.settings_file = settings_dir / "settings.yaml"

    def _load_settings(self) -> dict[str, Any]:
        """Load stored settings from the YAML file."""
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.settings_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring malformed settings file %s", self.settings_file)
            return {}
        return data

    def _save_settings(self, settings: dict[str, Any]) -> None:
        """Save settings to the YAML file."""
        self.settings_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings, f)

    @staticmethod
    def _check_key(key: str) -> None:
        if key not in DEFAULT_SETTINGS:
            known = ", ".join(sorted(DEFAULT_SETTINGS))
            raise SettingsError(f"Unknown setting '{key}' (expected one of: {known})")

    def get(self, key: str) -> Any:
        """Get a setting, falling back to its default."""
        self._check_key(key)
        return self._load_settings().get(key, DEFAULT_SETTINGS[key])

    def set(self, key: str, value: str) -> None:
        """Store a setting. String values are coerced to the key's type."""
        self._check_key(key)
        settings = self._load_settings()
        settings[key] = self._coerce(key, value)
        self._save_settings(settings)

    def unset(self, key: str) -> bool:
        """Remove a stored setting so its default applies again."""
        self._check_key(key)
        settings = self._load_settings()
        if key in settings:
            del settings[key]
            self._save_settings(settings)
            return True
        return False

    def list_settings(self) -> dict[str, Any]:
        """All settings with defaults applied."""
        merged = dict(DEFAULT_SETTINGS)
        merged.update({k: v for k, v in self._load_settings().items() if k in DEFAULT_SETTINGS})
        return merged

    def resolve_config_path(self, explicit: str | None = None) -> Path:
        """Pick the configuration file to render.

        Order: explicit argument, ``config_path`` setting, then
        ``uncrustify.cfg`` in the current directory.
        """
        if explicit:
            return Path(explicit).expanduser()
        configured = self.get("config_path")
        if configured:
            return Path(configured).expanduser()
        return Path.cwd() / CONFIG_FILE_NAME

    @staticmethod
    def _coerce(key: str, value: Any) -> Any:
        if not isinstance(DEFAULT_SETTINGS[key], bool) or isinstance(value, bool):
            return value

        lowered = str(value).strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise SettingsError(f"Setting '{key}' expects a boolean, got '{value}'")
