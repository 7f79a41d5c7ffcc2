"""Exceptions raised by the shipi18n client and locale helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from httpx import TransportError

from .config import API_KEY_ENV

SIGNUP_URL = "https://shipi18n.com"


class Shipi18nError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(Shipi18nError):
    """Raised when no API key could be resolved."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"{API_KEY_ENV} is not set. Get your free API key at {SIGNUP_URL}"
        )


class ServiceError(Shipi18nError):
    """The translation service answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.status_code = status_code
        self.payload = payload or {}
        super().__init__(message)

    @classmethod
    def from_payload(cls, status_code: int, payload: Dict[str, Any]) -> "ServiceError":
        message = payload.get("message") or f"Translation failed: {status_code}"
        return cls(str(message), status_code=status_code, payload=payload)


class TranslationError(Shipi18nError):
    """Raised when a message or locale bundle cannot be resolved."""


class LocaleNotFoundError(TranslationError):
    """No bundle exists for the requested locale."""


__all__ = [
    "ConfigurationError",
    "LocaleNotFoundError",
    "ServiceError",
    "Shipi18nError",
    "TranslationError",
    "TransportError",
]
