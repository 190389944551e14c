"""Typed async client for the storefront users/products/orders API."""

from storefront_client.config.settings import ClientSettings
from storefront_client.errors import (
    ApiClientError,
    ApplicationError,
    DecodeError,
    NetworkError,
    TransportError,
)
from storefront_client.integration.api_client import ApiClient, create_client
from storefront_client.logging_config import configure_logging
from storefront_client.models import (
    Envelope,
    Order,
    OrderItem,
    OrderItemInput,
    Product,
    User,
)

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ApplicationError",
    "ClientSettings",
    "DecodeError",
    "Envelope",
    "NetworkError",
    "Order",
    "OrderItem",
    "OrderItemInput",
    "Product",
    "TransportError",
    "User",
    "configure_logging",
    "create_client",
]
