"""Configuration manager for Trawler."""

import logging
from pathlib import Path

import yaml

from .schema import Settings

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "trawler"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigManager:
    """Manages reading and writing the settings file."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict:
        if not self.config_path.exists():
            return {}
        with open(self.config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed config file %s", self.config_path)
            return {}
        return data

    def load(self) -> Settings:
        """Load settings, falling back to defaults when the file is missing."""
        return Settings.from_dict(self._read())

    def save(self, settings: Settings) -> None:
        """Write settings back to disk."""
        self._ensure_dir()
        with open(self.config_path, "w") as f:
            yaml.dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)

    def _update_provider(self, key: str, **changes) -> bool:
        settings = self.load()
        provider = settings.providers.get(key)
        if provider is None:
            return False
        for attr, value in changes.items():
            setattr(provider, attr, value)
        self.save(settings)
        return True

    def set_enabled(self, key: str, enabled: bool) -> bool:
        """Enable or disable a provider. Returns True if found."""
        return self._update_provider(key, enabled=enabled)

    def set_base_url(self, key: str, base_url: str | None) -> bool:
        """Point a provider at a mirror. Returns True if found."""
        return self._update_provider(key, base_url=base_url)
