"""
shipi18n API client

A thin async wrapper around the shipi18n translation API.
Get your free API key at https://shipi18n.com
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence, Union

import httpx
import structlog

from .config import ClientConfig, ConfigLike, ConfigProvider, StaticConfigProvider, default_provider
from .errors import ConfigurationError, ServiceError
from .schemas import HealthStatus, JSONTranslationRequest, TranslationRequest, TranslationResult

logger = structlog.get_logger(__name__)

TRANSLATE_PATH = "/api/translate"
HEALTH_PATH = "/api/health"


def _language_list(target_languages: Sequence[str]) -> List[str]:
    # A bare string is a sequence too; list() would split it into characters
    if isinstance(target_languages, str):
        raise TypeError(
            f"target_languages must be a sequence of language codes, not a string: {target_languages!r}"
        )
    return list(target_languages)


class Shipi18nClient:
    """Client for the translate and health endpoints.

    Args:
        config: Explicit credentials. When omitted, ``provider`` is asked on
            every call (the process-wide provider by default).
        provider: Strategy used to resolve the config.
        http_client: Shared ``httpx.AsyncClient``. It is never closed by this
            class. Without one, a client is opened for the duration of an
            ``async with`` block, or per call outside of one.
        timeout: Passed to the ``httpx.AsyncClient`` opened by this class.
            ``None`` disables timeouts so callers stay in charge of
            cancellation.
    """

    def __init__(
        self,
        config: Optional[ConfigLike] = None,
        *,
        provider: Optional[ConfigProvider] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if config is not None:
            provider = StaticConfigProvider(config)
        self.provider = provider or default_provider
        self.http_client = http_client
        self.timeout = timeout
        self._owns_client = False

        self.logger = logger.bind(service="shipi18n")

    async def __aenter__(self) -> "Shipi18nClient":
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance opened it."""
        if self._owns_client and self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None
            self._owns_client = False

    async def translate(
        self,
        text: str,
        *,
        target_languages: Sequence[str],
        source_language: str = "en",
        preserve_placeholders: bool = True,
    ) -> TranslationResult:
        """Translate text to one or more languages.

        Returns the translations keyed by language code, each a list of
        ``{"original", "translated"}`` pairs.
        """
        config = self._require_api_key()
        request = TranslationRequest(
            text=text,
            source_language=source_language,
            target_languages=_language_list(target_languages),
            preserve_placeholders=preserve_placeholders,
        )
        return await self._post_translation(config, request)

    async def translate_json(
        self,
        json: Union[str, Dict[str, Any], Any],
        *,
        target_languages: Sequence[str],
        source_language: str = "en",
        preserve_placeholders: bool = True,
    ) -> TranslationResult:
        """Translate JSON while preserving its structure.

        ``json`` may be an already serialized string or a JSON-serializable
        object. Returns the translated objects keyed by language code.
        """
        config = self._require_api_key()
        request = JSONTranslationRequest(
            json=json,
            source_language=source_language,
            target_languages=_language_list(target_languages),
            preserve_placeholders=preserve_placeholders,
        )
        return await self._post_translation(config, request)

    async def health_check(self) -> HealthStatus:
        """Return the API health status.

        No API key is needed, and the body is returned whatever the status.
        """
        config = self.provider.resolve()
        async with self._client() as client:
            response = await client.get(f"{config.api_url}{HEALTH_PATH}")
        self.logger.debug("Health check completed", status_code=response.status_code)
        return response.json()

    def _require_api_key(self) -> ClientConfig:
        config = self.provider.resolve()
        if not config.api_key:
            raise ConfigurationError()
        return config

    async def _post_translation(
        self,
        config: ClientConfig,
        request: Union[TranslationRequest, JSONTranslationRequest],
    ) -> TranslationResult:
        headers = {
            "Content-Type": "application/json",
            "x-api-key": config.api_key,
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    f"{config.api_url}{TRANSLATE_PATH}",
                    headers=headers,
                    content=request.to_wire(),
                )
        except httpx.TransportError as e:
            self.logger.error(f"Translation request failed: {e}")
            raise

        result = self._handle_response(response)
        self.logger.info(
            "Translation completed",
            kind=type(request).__name__,
            source_language=request.source_language,
            target_languages=request.target_languages,
        )
        return result

    def _handle_response(self, response: httpx.Response) -> TranslationResult:
        if not response.is_success:
            try:
                payload = response.json()
            except ValueError:
                payload = {}
            if not isinstance(payload, dict):
                payload = {}

            error = ServiceError.from_payload(response.status_code, payload)
            self.logger.warning(
                "Translation rejected by service",
                status_code=response.status_code,
                error=str(error),
            )
            raise error

        return response.json()

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.http_client is not None:
            yield self.http_client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client


async def translate(
    text: str,
    *,
    target_languages: Sequence[str],
    source_language: str = "en",
    preserve_placeholders: bool = True,
    config: Optional[ConfigLike] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> TranslationResult:
    """Translate text with a one-off client (see :meth:`Shipi18nClient.translate`)."""
    client = Shipi18nClient(config, http_client=http_client)
    return await client.translate(
        text,
        target_languages=target_languages,
        source_language=source_language,
        preserve_placeholders=preserve_placeholders,
    )


async def translate_json(
    json: Union[str, Dict[str, Any], Any],
    *,
    target_languages: Sequence[str],
    source_language: str = "en",
    preserve_placeholders: bool = True,
    config: Optional[ConfigLike] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> TranslationResult:
    """Translate JSON with a one-off client (see :meth:`Shipi18nClient.translate_json`)."""
    client = Shipi18nClient(config, http_client=http_client)
    return await client.translate_json(
        json,
        target_languages=target_languages,
        source_language=source_language,
        preserve_placeholders=preserve_placeholders,
    )


async def health_check(
    config: Optional[ConfigLike] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> HealthStatus:
    """Check the API health with a one-off client."""
    return await Shipi18nClient(config, http_client=http_client).health_check()


__all__ = [
    "HEALTH_PATH",
    "TRANSLATE_PATH",
    "Shipi18nClient",
    "health_check",
    "translate",
    "translate_json",
]
