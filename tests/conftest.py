from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from fastapi.responses import RedirectResponse
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from intercom_auth.api import routes_auth
from intercom_auth.auth import IntercomStrategy, NormalizedProfile
from intercom_auth.main import create_app


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


class FakeFlow:
    """Stand-in for the Authlib-backed flow used by the auth routes."""

    def __init__(self) -> None:
        self.profile: NormalizedProfile | None = None
        self.error: Exception | None = None
        self.redirect_uris: list[str | None] = []

    async def authorize_redirect(self, request: Any, redirect_uri: str | None = None) -> RedirectResponse:
        self.redirect_uris.append(redirect_uri)
        return RedirectResponse(url=f"https://app.intercom.io/oauth?redirect_uri={redirect_uri}", status_code=302)

    async def complete(self, request: Any) -> NormalizedProfile:
        if self.error is not None:
            raise self.error
        assert self.profile is not None
        return self.profile


@pytest.fixture()
def make_strategy() -> Callable[..., IntercomStrategy]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> IntercomStrategy:
        transport = RecordingTransport(handler)
        strategy = IntercomStrategy(
            client_id="123-456-789",
            client_secret="shhh-its-a-secret",  # pragma: allowlist secret
            callback_url="https://www.example.net/auth/intercom/callback",
            transport=transport,
            **kwargs,
        )
        return strategy

    return _make


@pytest.fixture()
def fake_flow(monkeypatch: pytest.MonkeyPatch) -> FakeFlow:
    flow = FakeFlow()
    monkeypatch.setattr(routes_auth, "get_intercom_flow", lambda: flow)
    return flow


@pytest.fixture()
def app(fake_flow: FakeFlow) -> TestClient:
    return TestClient(create_app())
