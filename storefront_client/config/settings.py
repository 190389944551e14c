"""Pydantic Settings for the storefront API client.

All environment variables use the STOREFRONT_ prefix.
Example: STOREFRONT_API_BASE_URL=https://shop.example.com/
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Backend
    api_base_url: str = ""  # Empty means requests target relative paths
    timeout_seconds: float | None = Field(default=None, gt=0)  # None = no timeout

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "STOREFRONT_"}

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        return value.rstrip("/")
