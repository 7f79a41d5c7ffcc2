"""
Configuration resolution for the translation client.

Values come from an explicit override, the environment (``SHIPI18N_*``
variables or a ``.env`` file) or the built-in defaults, in that order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://x9527l3blg.execute-api.us-east-1.amazonaws.com"
API_KEY_ENV = "SHIPI18N_API_KEY"


# Shared by the per-concern settings models below
_SETTINGS_CONFIG = SettingsConfigDict(
    env_prefix="SHIPI18N_",
    env_file=".env",
    case_sensitive=False,
    extra="ignore",
)


class ClientSettings(BaseSettings):
    """Translation API settings"""

    model_config = _SETTINGS_CONFIG

    api_key: Optional[str] = None
    api_url: Optional[str] = None


class LocaleSettings(BaseSettings):
    """Locale loading settings"""

    model_config = _SETTINGS_CONFIG

    default_locale: str = "en"


class LoggingSettings(BaseSettings):
    """Logging settings"""

    model_config = _SETTINGS_CONFIG

    log_level: str = "INFO"
    json_logs: bool = True


@dataclass(frozen=True)
class ClientConfig:
    """Credentials and base URL used for a single API call."""

    api_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClientConfig":
        """Build a config from ``api_key``/``api_url`` or ``apiKey``/``apiUrl`` keys."""
        values = {}
        for field, alias in (("api_key", "apiKey"), ("api_url", "apiUrl")):
            if field in data:
                values[field] = data[field]
            elif alias in data:
                values[field] = data[alias]
        return cls(**values)


ConfigLike = Union[ClientConfig, Mapping[str, Any]]


def _coerce(config: ConfigLike) -> ClientConfig:
    if isinstance(config, ClientConfig):
        return config
    return ClientConfig.from_mapping(config)


class ConfigProvider(Protocol):
    def resolve(self) -> ClientConfig:
        ...


class EnvironmentConfigProvider:
    """Read the config from the environment every time it is resolved."""

    def __init__(self, env_file: Optional[str] = ".env") -> None:
        self.env_file = env_file

    def load_settings(self) -> ClientSettings:
        return ClientSettings(_env_file=self.env_file)

    def resolve(self) -> ClientConfig:
        settings = self.load_settings()
        return ClientConfig(
            api_key=settings.api_key or None,
            api_url=settings.api_url or DEFAULT_API_URL,
        )


class StaticConfigProvider:
    """Always return the same config."""

    def __init__(self, config: ConfigLike) -> None:
        self.config = _coerce(config)

    def resolve(self) -> ClientConfig:
        return self.config


class OverridableConfigProvider:
    """Return the override when one is set, otherwise ask ``fallback``.

    The override is returned verbatim, even when its fields are empty.
    """

    def __init__(self, fallback: Optional[ConfigProvider] = None) -> None:
        self.fallback = fallback or EnvironmentConfigProvider()
        self._override: Optional[ClientConfig] = None

    @property
    def override(self) -> Optional[ClientConfig]:
        return self._override

    def set(self, config: ConfigLike) -> None:
        self._override = _coerce(config)

    def reset(self) -> None:
        self._override = None

    def resolve(self) -> ClientConfig:
        if self._override is not None:
            return self._override
        return self.fallback.resolve()


# Process-wide provider used when no config is passed explicitly
default_provider = OverridableConfigProvider()


def get_config() -> ClientConfig:
    """Resolve the process-wide config."""
    return default_provider.resolve()


def set_config(config: ConfigLike) -> None:
    """Override the process-wide config (mostly useful in tests)."""
    default_provider.set(config)


def reset_config() -> None:
    """Drop the override and go back to environment resolution."""
    default_provider.reset()


__all__ = [
    "API_KEY_ENV",
    "DEFAULT_API_URL",
    "ClientConfig",
    "ClientSettings",
    "ConfigLike",
    "ConfigProvider",
    "EnvironmentConfigProvider",
    "LocaleSettings",
    "LoggingSettings",
    "OverridableConfigProvider",
    "StaticConfigProvider",
    "default_provider",
    "get_config",
    "reset_config",
    "set_config",
]
