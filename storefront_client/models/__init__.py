"""Public models for the storefront client."""

from storefront_client.models.requests import (
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    OrderItemInput,
)
from storefront_client.models.responses import Envelope
from storefront_client.models.schemas import Order, OrderItem, Product, User

__all__ = [
    "CreateOrderRequest",
    "CreateProductRequest",
    "CreateUserRequest",
    "Envelope",
    "Order",
    "OrderItem",
    "OrderItemInput",
    "Product",
    "User",
]
