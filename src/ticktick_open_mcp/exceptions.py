"""
Exception hierarchy for the TickTick Open API MCP server.

All errors raised by the HTTP client derive from TickTickError. The tool
dispatcher is the only place that converts them into MCP protocol errors.
"""

from __future__ import annotations

from typing import Any


class TickTickError(Exception):
    """Base class for all TickTick errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class TickTickConfigurationError(TickTickError):
    """Raised when the server is missing required configuration (e.g. a token)."""


class TickTickNetworkError(TickTickError):
    """Raised when the upstream API could not be reached."""


class TickTickAPIError(TickTickError):
    """Raised when the upstream API answers with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: Any = None,
        method: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(
            message,
            details={"status": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path

    def __str__(self) -> str:
        return f"TickTick API error ({self.status_code}): {self.message}"


class TickTickAuthenticationError(TickTickAPIError):
    """Raised on 401/403 responses."""


class TickTickNotFoundError(TickTickAPIError):
    """Raised on 404 responses."""


class TickTickRateLimitError(TickTickAPIError):
    """Raised on 429 responses."""


def api_error_for_status(status_code: int) -> type[TickTickAPIError]:
    """Pick the most specific TickTickAPIError subclass for a status code."""
    if status_code in (401, 403):
        return TickTickAuthenticationError
    if status_code == 404:
        return TickTickNotFoundError
    if status_code == 429:
        return TickTickRateLimitError
    return TickTickAPIError
