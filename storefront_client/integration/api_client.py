"""Async HTTP client for the storefront REST backend.

Wraps GET/POST calls to the users, products and orders resources, unwraps
the { success, message, data } envelope and validates the payload into
typed records. Every call is a single request with redirects followed:
no retries, no caching, and no timeout unless one is configured.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from storefront_client.config.settings import ClientSettings
from storefront_client.errors import (
    ApiClientError,
    ApplicationError,
    DecodeError,
    NetworkError,
    TransportError,
)
from storefront_client.models.requests import (
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    OrderItemInput,
)
from storefront_client.models.responses import Envelope
from storefront_client.models.schemas import Order, Product, User

logger = logging.getLogger(__name__)

_ENVELOPE = TypeAdapter(Envelope[Any])


class _SharedTransport(httpx.AsyncBaseTransport):
    """Lends a caller-owned transport to a per-call client without closing it."""

    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self._transport = transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        pass  # Owned by the caller


class ApiClient:
    """HTTP client for the storefront API.

    Parameters
    ----------
    base_url:
        Origin or prefix prepended to every endpoint path
        (e.g. "https://shop.example.com"). Trailing slashes are stripped.
        An empty string targets relative paths.
    timeout:
        Per-request timeout in seconds. None (the default) disables it.
    headers:
        Extra default headers sent with every request. ``Content-Type`` and
        ``X-Request-ID`` are always set by the client.
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests. It is
        shared by every call and never closed by the client.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._default_headers = dict(headers or {})
        self._transport = (
            _SharedTransport(transport) if transport is not None else None
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> ApiClient:
        """Build a client from validated settings."""
        return cls(settings.api_base_url, timeout=settings.timeout_seconds, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, path: str) -> str:
        """Join the base URL and ``path`` with exactly one slash between them."""
        return f"{self._base_url}/{path.lstrip('/')}"

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    async def get(self, path: str, response_model: Any = None) -> Any:
        """GET ``path`` and return the unwrapped envelope data.

        If ``response_model`` is given (a model class or a type such as
        ``list[User]``), the data is validated into it.
        """
        return await self._request("GET", path, response_model=response_model)

    async def post(self, path: str, body: Any, response_model: Any = None) -> Any:
        """POST ``body`` as JSON to ``path`` and return the unwrapped envelope data.

        Pydantic models are serialized without unset optional fields; any
        other value is sent as-is.
        """
        content = json.dumps(_encode_body(body)).encode("utf-8")
        return await self._request(
            "POST", path, content=content, response_model=response_model
        )

    # ------------------------------------------------------------------
    # Resource bindings
    # ------------------------------------------------------------------

    async def list_users(self) -> list[User]:
        return await self.get("/api/users", list[User])

    async def list_products(self) -> list[Product]:
        return await self.get("/api/products", list[Product])

    async def list_orders(self) -> list[Order]:
        return await self.get("/api/orders", list[Order])

    async def create_user(self, username: str, email: str) -> User:
        body = CreateUserRequest(username=username, email=email)
        return await self.post("/api/users", body, User)

    async def create_product(
        self, name: str, description: str, price: float, stock: int
    ) -> Product:
        body = CreateProductRequest(
            name=name, description=description, price=price, stock=stock
        )
        return await self.post("/api/products", body, Product)

    async def create_order(
        self,
        user_id: int,
        items: Sequence[OrderItemInput | Mapping[str, Any]],
        status: str | None = None,
    ) -> Order:
        """Create an order. When ``status`` is None the backend picks the default."""
        body = CreateOrderRequest(user_id=user_id, items=list(items), status=status)
        return await self.post("/api/orders", body, Order)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        content: bytes | None = None,
        response_model: Any = None,
    ) -> Any:
        url = self.build_url(path)
        request_id = str(uuid.uuid4())
        headers = httpx.Headers(self._default_headers)
        headers["Content-Type"] = "application/json"
        headers["X-Request-ID"] = request_id
        log_extra: dict[str, Any] = {
            "request_id": request_id,
            "method": method,
            "url": url,
        }
        started = time.monotonic()

        try:
            try:
                async with httpx.AsyncClient(
                    transport=self._transport,
                    timeout=self._timeout,
                    follow_redirects=True,
                ) as client:
                    if method == "GET":
                        response = await client.get(url, headers=headers)
                    else:
                        response = await client.post(
                            url, headers=headers, content=content
                        )
            except httpx.RequestError as exc:
                raise NetworkError(
                    f"Network error: {exc.__class__.__name__} for {method} {url}"
                ) from exc

            log_extra["status_code"] = response.status_code
            log_extra["duration_ms"] = round((time.monotonic() - started) * 1000, 2)
            logger.debug("%s %s -> %d", method, url, response.status_code, extra=log_extra)

            return _unwrap(response, response_model)

        except ApiClientError as exc:
            logger.warning(
                "%s %s failed: %s",
                method,
                url,
                exc.message,
                extra={**log_extra, "error_reason": exc.__class__.__name__},
            )
            raise


def _encode_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return to_jsonable_python(body)


def _unwrap(response: httpx.Response, response_model: Any) -> Any:
    """Validate status, envelope and payload, in that order."""
    if not response.is_success:
        raise TransportError(response.status_code, response.reason_phrase)

    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError("Response body is not valid JSON") from exc

    try:
        envelope = _ENVELOPE.validate_python(payload)
    except ValidationError as exc:
        raise DecodeError("Response body is not an API envelope") from exc

    if not envelope.success:
        raise ApplicationError(envelope.message)

    if response_model is None:
        return envelope.data

    try:
        return TypeAdapter(response_model).validate_python(envelope.data)
    except ValidationError as exc:
        raise DecodeError(
            f"Response data does not match {_type_name(response_model)}",
            errors=exc.errors(include_url=False),
        ) from exc


def _type_name(tp: Any) -> str:
    if hasattr(tp, "__origin__"):
        return repr(tp)
    return getattr(tp, "__name__", repr(tp))


def create_client(settings: ClientSettings | None = None, **kwargs: Any) -> ApiClient:
    """Create a client, loading ``ClientSettings`` from the environment if none given."""
    if settings is None:
        settings = ClientSettings()
    return ApiClient.from_settings(settings, **kwargs)
