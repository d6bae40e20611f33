"""Exceptions raised by the Asana transport, pager and decoders.

All library errors derive from AsanaError so callers can catch a single type.
None of these are retried inside the library.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class AsanaError(Exception):
    """Base exception for all asana_client errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(AsanaError):
    """Raised when the client configuration is incomplete or invalid."""


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(AsanaError):
    """Raised when a request could not be delivered (network, DNS, TLS)."""

    def __init__(self, message: str, details: str | None = None, url: str | None = None):
        self.url = url
        super().__init__(message, details)


class TransportTimeoutError(TransportError):
    """Raised when a request exceeds its deadline."""

    def __init__(self, url: str, timeout: float | None):
        self.timeout = timeout
        super().__init__(
            f"Request to {url} timed out",
            f"No response after {timeout} seconds." if timeout is not None else None,
            url,
        )


class RequestCancelledError(TransportError):
    """Raised when a caller cancels a paged listing between requests."""

    def __init__(self, pages: int = 0):
        self.pages = pages
        super().__init__("Paged listing cancelled", f"Stopped after {pages} pages")


# =============================================================================
# Response Errors
# =============================================================================


class APIError(AsanaError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        errors: list[dict[str, Any]] | None = None,
        body: str | None = None,
    ):
        self.status_code = status_code
        self.errors = errors or []
        self.body = body
        messages = [e.get("message", "") for e in self.errors if e.get("message")]
        details = "; ".join(messages) if messages else (body or None)
        super().__init__(f"API request failed with HTTP {status_code}", details)


class DecodeError(AsanaError):
    """Raised when a response or webhook body is not the expected JSON."""


class PageProgressError(AsanaError):
    """Raised when a paged listing stops advancing its cursor."""

    def __init__(self, message: str, offset: str | None = None, pages: int = 0):
        self.offset = offset
        self.pages = pages
        details = f"Last offset {offset!r} after {pages} pages" if offset else None
        super().__init__(message, details)
