"""Configuration management for Trawler."""

from .manager import ConfigManager
from .schema import ProviderConfig, Settings

__all__ = [
    "ConfigManager",
    "ProviderConfig",
    "Settings",
]
