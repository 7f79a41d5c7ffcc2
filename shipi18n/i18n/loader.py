"""Active locale state and on-demand loading of locale bundles."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import structlog

from ..config import LocaleSettings
from ..errors import TranslationError
from .providers import LocaleBundle, LocaleProvider, PackagedLocaleProvider
from .translator import Translator

logger = structlog.get_logger(__name__)


class LocaleLoader:
    """Keep the registered locale bundles and the active locale.

    Bundles missing from the registry are fetched through ``provider``, an
    async ``code -> bundle`` callable. A failed fetch never reaches the
    caller; the default locale is activated instead.
    """

    def __init__(
        self,
        provider: Optional[LocaleProvider] = None,
        *,
        default_locale: str = "en",
        messages: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> None:
        self.provider = provider or PackagedLocaleProvider()
        self.default_locale = default_locale
        self.locale = default_locale
        self._messages: Dict[str, LocaleBundle] = {
            code: dict(bundle) for code, bundle in (messages or {}).items()
        }
        self.logger = logger.bind(component="locale_loader")

    @property
    def available_locales(self) -> List[str]:
        return list(self._messages)

    async def load_locale(self, code: str) -> None:
        """Activate *code*, fetching its bundle first when needed."""

        if code in self._messages:
            self.locale = code
            return

        try:
            bundle = await self.provider(code)
            if not isinstance(bundle, Mapping):
                raise TranslationError(f"Locale bundle for '{code}' must be a mapping")
        except Exception as e:
            self.logger.warning(
                f"Locale {code} not found, falling back to {self.default_locale}",
                error=str(e),
            )
            self.locale = self.default_locale
            return

        self._messages[code] = dict(bundle)
        self.locale = code
        self.logger.info("Locale loaded", locale=code)

    def add_locale_messages(self, code: str, messages: Mapping[str, Any]) -> None:
        """Register *messages* for *code*, replacing any previous bundle.

        The active locale is left unchanged.
        """

        self._messages[code] = dict(messages)

    def get_locale_messages(self, code: str) -> LocaleBundle:
        return self._messages.get(code, {})

    def translator(self, code: Optional[str] = None) -> Translator:
        """Return a :class:`Translator` for *code* (the active locale by default)."""

        code = code or self.locale
        return Translator(
            locale=code,
            messages=self.get_locale_messages(code),
            fallback_locale=self.default_locale,
            fallback_messages=self.get_locale_messages(self.default_locale),
        )

    def t(self, key: str, **params: Any) -> str:
        """Translate *key* in the active locale; unknown keys are returned as-is."""

        try:
            return self.translator().translate(key, **params)
        except TranslationError:
            self.logger.warning("Missing translation", key=key, locale=self.locale)
            return key

    def tc(self, key: str, count: float, **params: Any) -> str:
        """Plural-aware variant of :meth:`t`."""

        try:
            return self.translator().translate_plural(key, count, **params)
        except TranslationError:
            self.logger.warning("Missing translation", key=key, locale=self.locale)
            return key


def create_default_loader() -> LocaleLoader:
    """Build a loader with the packaged default locale preloaded."""

    settings = LocaleSettings()
    provider = PackagedLocaleProvider()
    default_locale = settings.default_locale
    try:
        messages = {default_locale: provider.load(default_locale)}
    except TranslationError:
        messages = {"en": provider.load("en")}
        default_locale = "en"
    return LocaleLoader(provider, default_locale=default_locale, messages=messages)


# Global loader instance
i18n = create_default_loader()


async def load_locale(code: str) -> None:
    """Switch the global loader to *code*."""
    await i18n.load_locale(code)


def add_locale_messages(code: str, messages: Mapping[str, Any]) -> None:
    """Register translated messages on the global loader."""
    i18n.add_locale_messages(code, messages)


__all__ = [
    "LocaleLoader",
    "add_locale_messages",
    "create_default_loader",
    "i18n",
    "load_locale",
]
