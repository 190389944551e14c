"""Backend integration — the storefront API client."""

from storefront_client.integration.api_client import ApiClient, create_client

__all__ = [
    "ApiClient",
    "create_client",
]
