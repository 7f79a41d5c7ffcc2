"""Python client for the shipi18n translation API, plus locale bundle helpers."""

from .client import Shipi18nClient, health_check, translate, translate_json
from .config import ClientConfig, get_config, reset_config, set_config
from .errors import ConfigurationError, ServiceError, Shipi18nError, TransportError
from .i18n import LocaleLoader, Translator, add_locale_messages, load_locale
from .logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "LocaleLoader",
    "ServiceError",
    "Shipi18nClient",
    "Shipi18nError",
    "TransportError",
    "Translator",
    "add_locale_messages",
    "configure_logging",
    "get_config",
    "health_check",
    "load_locale",
    "reset_config",
    "set_config",
    "translate",
    "translate_json",
]
