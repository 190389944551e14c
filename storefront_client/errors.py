"""Client error hierarchy.

All client-specific errors extend ApiClientError. Each call either returns a
fully validated payload or raises exactly one of these; nothing is retried
or replaced with a fallback value.
"""

from __future__ import annotations


class ApiClientError(Exception):
    """Base error for all storefront client errors."""

    message: str = "API client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(ApiClientError):
    """The backend answered with a non-2xx HTTP status."""

    message = "Transport error"

    def __init__(self, status_code: int, status_text: str = "", **kwargs: object) -> None:
        self.status_code = status_code
        self.status_text = status_text
        text = f"Transport error: {status_code} {status_text}".rstrip()
        super().__init__(text, status_code=status_code, status_text=status_text, **kwargs)


class ApplicationError(ApiClientError):
    """The envelope reported ``success: false`` despite a 2xx status."""

    message = "Application error"

    def __init__(self, server_message: str = "", **kwargs: object) -> None:
        self.server_message = server_message
        super().__init__(f"Application error: {server_message}", **kwargs)


class DecodeError(ApiClientError):
    """The body was not JSON, not an envelope, or the payload failed validation."""

    message = "Malformed response body"


class NetworkError(ApiClientError):
    """No HTTP response was received (connection, DNS, or timeout failure)."""

    message = "Network error"
