"""Utilities that power localisation across the project."""

from .loader import LocaleLoader, add_locale_messages, i18n, load_locale
from .providers import DirectoryLocaleProvider, PackagedLocaleProvider, get_available_locales
from .translator import Translator
from ..errors import LocaleNotFoundError, TranslationError

__all__ = [
    "DirectoryLocaleProvider",
    "LocaleLoader",
    "LocaleNotFoundError",
    "PackagedLocaleProvider",
    "TranslationError",
    "Translator",
    "add_locale_messages",
    "get_available_locales",
    "i18n",
    "load_locale",
]
