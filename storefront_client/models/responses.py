"""Generic API response envelope model.

Every backend endpoint wraps its payload in this envelope:
{ success: bool, message: str, data: T }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, field_validator

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """JSON envelope for all API responses.

    When ``success`` is False, ``data`` is ignored and ``message`` carries
    the server-side error.
    """

    success: bool
    message: str = ""
    data: T | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _null_message_is_empty(cls, value: object) -> object:
        return "" if value is None else value
