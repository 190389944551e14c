"""Shared test fixtures for the storefront client test suite."""

from __future__ import annotations

import os
from collections.abc import Callable

import httpx
import pytest

from storefront_client.config.settings import ClientSettings
from storefront_client.integration.api_client import ApiClient

BASE_URL = "http://shop.test"


# ---------------------------------------------------------------------------
# Keep the developer's environment out of ClientSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_client_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove STOREFRONT_* variables so settings tests start from defaults."""
    for key in list(os.environ):
        if key.startswith("STOREFRONT_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ClientSettings:
    """Test settings pointing at the fake backend origin."""
    return ClientSettings(api_base_url=BASE_URL)


# ---------------------------------------------------------------------------
# Mocked transport
# ---------------------------------------------------------------------------

@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests seen by the mocked transport, in order."""
    return []


@pytest.fixture
def make_client(
    sent_requests: list[httpx.Request],
) -> Callable[..., ApiClient]:
    """Factory for clients whose transport answers every request with one canned response.

    Pass ``json_body`` for a JSON response or ``content`` for raw bytes.
    """

    def _make(
        status_code: int = 200,
        json_body: object = None,
        content: bytes | None = None,
        base_url: str = BASE_URL,
        **client_kwargs: object,
    ) -> ApiClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        return ApiClient(
            base_url, transport=httpx.MockTransport(handler), **client_kwargs
        )

    return _make
