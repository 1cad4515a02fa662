"""Configuration schema for Trawler."""

from dataclasses import dataclass, field

from ..sources.base import TIMEOUT, USER_AGENT


@dataclass
class ProviderConfig:
    """Configuration for one torrent provider."""

    name: str  # key in SOURCE_CLASSES, e.g. "1337x"
    base_url: str | None = None  # None uses the provider's default
    enabled: bool = True

    def to_dict(self) -> dict:
        return {
            "base_url": self.base_url,
            "enabled": self.enabled,
        }

    @classmethod
    def from_dict(cls, key: str, data: dict) -> "ProviderConfig":
        return cls(
            name=key,
            base_url=data.get("base_url"),
            enabled=bool(data.get("enabled", True)),
        )


def default_providers() -> dict[str, ProviderConfig]:
    return {
        "1337x": ProviderConfig(name="1337x"),
        "yts": ProviderConfig(name="yts"),
        "eztv": ProviderConfig(name="eztv"),
    }


@dataclass
class Settings:
    """Top level settings."""

    timeout: float = TIMEOUT
    user_agent: str = USER_AGENT
    providers: dict[str, ProviderConfig] = field(default_factory=default_providers)

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}

    def enabled_providers(self) -> dict[str, ProviderConfig]:
        return {k: v for k, v in self.providers.items() if v.enabled}

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {
            "version": 1,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
            "providers": {k: v.to_dict() for k, v in self.providers.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create from dictionary (YAML deserialization)."""
        providers = default_providers()
        for key, provider_data in (data.get("providers") or {}).items():
            try:
                providers[key] = ProviderConfig.from_dict(key, provider_data)
            except (AttributeError, TypeError):
                continue  # Skip invalid entries

        try:
            timeout = float(data.get("timeout", TIMEOUT))
        except (TypeError, ValueError):
            timeout = TIMEOUT

        return cls(
            timeout=timeout,
            user_agent=data.get("user_agent") or USER_AGENT,
            providers=providers,
        )
