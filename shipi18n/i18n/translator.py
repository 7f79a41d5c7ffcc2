"""Message lookup over locale bundles, with placeholders and plural variants."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from babel import Locale, UnknownLocaleError

from ..errors import TranslationError

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def lookup(messages: Mapping[str, Any], key: str) -> Optional[Any]:
    """Find *key* in *messages*, either as a literal key or a dotted path."""

    if key in messages:
        return messages[key]

    node: Any = messages
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders, leaving unknown ones untouched."""

    if not params:
        return template

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_RE.sub(_replace, template)


def plural_category(locale: str, count: float) -> str:
    """Return the CLDR plural category of *count* for *locale*."""

    try:
        parsed = Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError):
        parsed = Locale("en")
    return parsed.plural_form(abs(count))


@dataclass(frozen=True)
class Translator:
    """Resolve messages from a locale bundle, then from the fallback bundle."""

    locale: str
    messages: Mapping[str, Any]
    fallback_locale: str = "en"
    fallback_messages: Mapping[str, Any] = field(default_factory=dict)

    def translate(self, key: str, **params: Any) -> str:
        """Return the translation for *key* or raise :class:`TranslationError`."""

        template = self._resolve(key)
        if template is None:
            raise TranslationError(f"Translation for '{key}' not found")
        return interpolate(template, params)

    def translate_plural(self, key: str, count: float, **params: Any) -> str:
        """Return the plural variant of *key* matching *count*.

        ``{key}_{category}`` is tried first, then ``{key}_other`` and finally
        the bare key. ``count`` is available as the ``{count}`` placeholder.
        """

        category = plural_category(self.locale, count)
        params.setdefault("count", count)
        for candidate in (f"{key}_{category}", f"{key}_other", key):
            template = self._resolve(candidate)
            if template is not None:
                return interpolate(template, params)
        raise TranslationError(f"Translation for '{key}' not found")

    def has(self, key: str) -> bool:
        return self._resolve(key) is not None

    def _resolve(self, key: str) -> Optional[str]:
        for bundle in (self.messages, self.fallback_messages):
            value = lookup(bundle, key)
            if isinstance(value, str):
                return value
        return None


__all__ = [
    "Translator",
    "interpolate",
    "lookup",
    "plural_category",
]
