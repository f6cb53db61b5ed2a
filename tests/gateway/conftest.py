"""Shared fixtures for gateway tests."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from avagate.gateway.app import create_app
from avagate.gateway.config import Settings
from avagate.providers.http import HTTPAvatarProvider

DIRECT_URL = "https://direct.test/avatar"
GENERATED_URL = "https://generated.test/api/avatar"


class Upstream:
    """Scriptable fake of both upstreams, recording every request.

    ``direct`` and ``generated`` are handlers ``(request) -> httpx.Response``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.direct: Callable[[httpx.Request], httpx.Response] = lambda r: httpx.Response(404)
        self.generated: Callable[[httpx.Request], httpx.Response] = lambda r: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "direct.test":
            return self.direct(request)
        return self.generated(request)

    @property
    def direct_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "direct.test"]

    @property
    def generated_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "generated.test"]


@pytest.fixture()
def settings(monkeypatch) -> Settings:
    monkeypatch.setenv("AVAGATE_DIRECT_URL", DIRECT_URL)
    monkeypatch.setenv("AVAGATE_GENERATED_URL", GENERATED_URL)
    return Settings()


@pytest.fixture()
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture()
def client(settings, upstream):
    """TestClient for a gateway whose HTTP provider talks to ``upstream``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    provider = HTTPAvatarProvider(
        http_client,
        direct_url=settings.direct_url,
        generated_url=settings.generated_url,
    )
    app = create_app(settings=settings, provider=provider)
    with TestClient(app) as c:
        yield c
