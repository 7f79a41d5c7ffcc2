"""Sources of locale bundles used by :class:`~shipi18n.i18n.loader.LocaleLoader`."""

from __future__ import annotations

import asyncio
import json
from importlib import resources
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Mapping, Union

from ..errors import LocaleNotFoundError, TranslationError

LocaleBundle = Dict[str, Any]

# Asynchronous ``code -> bundle`` callable; any exception counts as a failed load.
LocaleProvider = Callable[[str], Awaitable[Mapping[str, Any]]]

DEFAULT_PACKAGE = "shipi18n.i18n"


def parse_bundle(code: str, raw: str) -> LocaleBundle:
    """Decode a JSON locale bundle, which must be an object."""

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TranslationError(f"Invalid translation file for '{code}'") from exc

    if not isinstance(data, dict):
        raise TranslationError("Translation file must contain an object")

    return data


def _read_bundle(locales_dir: Any, code: str) -> LocaleBundle:
    if not locales_dir.is_dir():
        raise TranslationError("Locale resources are missing")

    resource = locales_dir.joinpath(f"{code}.json")
    if not resource.is_file():
        raise LocaleNotFoundError(f"Locale '{code}' is not available")

    return parse_bundle(code, resource.read_text(encoding="utf-8"))


def _validate_code(code: str) -> None:
    # Codes end up in file names
    if not code or "/" in code or "\\" in code or code.startswith("."):
        raise LocaleNotFoundError(f"Invalid locale code '{code}'")


class PackagedLocaleProvider:
    """Load ``<package>/locales/<code>.json`` from installed package data."""

    def __init__(self, package: str = DEFAULT_PACKAGE) -> None:
        self.package = package

    def load(self, code: str) -> LocaleBundle:
        _validate_code(code)
        return _read_bundle(resources.files(self.package).joinpath("locales"), code)

    async def __call__(self, code: str) -> LocaleBundle:
        return await asyncio.to_thread(self.load, code)


class DirectoryLocaleProvider:
    """Load ``<directory>/<code>.json`` from the filesystem."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def load(self, code: str) -> LocaleBundle:
        _validate_code(code)
        return _read_bundle(self.directory, code)

    async def __call__(self, code: str) -> LocaleBundle:
        return await asyncio.to_thread(self.load, code)


def get_available_locales(package: str = DEFAULT_PACKAGE) -> Dict[str, str]:
    """Return the list of bundled locale identifiers."""

    locales_dir = resources.files(package).joinpath("locales")
    if not locales_dir.is_dir():
        return {}

    locales = {}
    for resource in locales_dir.iterdir():
        if resource.name.endswith(".json") and resource.is_file():
            code = resource.name[: -len(".json")]
            locales[code] = code
    return locales


__all__ = [
    "DirectoryLocaleProvider",
    "LocaleBundle",
    "LocaleProvider",
    "PackagedLocaleProvider",
    "get_available_locales",
    "parse_bundle",
]
