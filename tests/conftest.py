"""Shared fixtures for the shipi18n test-suite."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from shipi18n.config import reset_config


class FakeTranslationAPI:
    """In-memory stand-in for the translation service."""

    def __init__(self) -> None:
        self.status_code = 200
        self.json_body: Optional[Any] = {}
        self.raw_body: Optional[bytes] = None
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Start every test without an override, environment values or ``.env`` file."""

    for name in ("SHIPI18N_API_KEY", "SHIPI18N_API_URL", "SHIPI18N_DEFAULT_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fake_api():
    return FakeTranslationAPI()
