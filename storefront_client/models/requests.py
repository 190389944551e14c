"""Request bodies for the create endpoints.

These are typed carriers only. Range and format checks belong to the backend.
"""

from __future__ import annotations

from pydantic import BaseModel


class OrderItemInput(BaseModel):
    """Order line as sent when creating an order. Unknown keys are sent through."""

    product_id: int
    quantity: int
    price: float

    model_config = {"extra": "allow"}


class CreateUserRequest(BaseModel):
    """Body for POST /api/users."""

    username: str
    email: str


class CreateProductRequest(BaseModel):
    """Body for POST /api/products."""

    name: str
    description: str
    price: float
    stock: int


class CreateOrderRequest(BaseModel):
    """Body for POST /api/orders. ``status`` is omitted from the JSON when unset."""

    user_id: int
    items: list[OrderItemInput]
    status: str | None = None
