"""Entity records returned by the storefront backend.

Fields beyond the ones declared here are kept on the model (``extra="allow"``)
so that backend additions pass through untouched.
"""

from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    """A registered shop user."""

    id: int
    username: str
    email: str

    model_config = {"extra": "allow"}


class Product(BaseModel):
    """A product in the catalogue."""

    id: int
    name: str
    description: str | None = None
    price: float
    stock: int

    model_config = {"extra": "allow"}


class OrderItem(BaseModel):
    """A single line of a persisted order."""

    product_id: int
    quantity: int
    price: float

    model_config = {"extra": "allow"}


class Order(BaseModel):
    """An order placed by a user."""

    id: int
    user_id: int
    items: list[OrderItem] = []
    status: str | None = None  # Backend applies its own default

    model_config = {"extra": "allow"}
