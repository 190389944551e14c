"""Configuration module — client settings."""

from storefront_client.config.settings import ClientSettings

__all__ = [
    "ClientSettings",
]
