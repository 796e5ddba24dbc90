"""
HTTP client for the TickTick Open API.

TickTickClient performs exactly one request per call: no retries, no caching.
Every request carries the bearer token from Settings; a missing token fails
before any network activity.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, TypeVar

import httpx

from ticktick_open_mcp import __version__
from ticktick_open_mcp.constants import SERVER_NAME
from ticktick_open_mcp.exceptions import (
    TickTickConfigurationError,
    TickTickNetworkError,
    api_error_for_status,
)
from ticktick_open_mcp.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="TickTickClient")


class TickTickClient:
    """
    Thin async wrapper around ``httpx.AsyncClient`` bound to the Open API.

    Usage:
        async with TickTickClient(settings) as client:
            projects = await client.request("GET", "/project")

    A custom ``transport`` may be supplied, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": f"{SERVER_NAME}/{__version__}",
            },
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def __aenter__(self: T) -> T:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _auth_headers(self) -> dict[str, str]:
        token = self._settings.bearer_token
        if token is None:
            raise TickTickConfigurationError(
                "TickTick access token is not configured. "
                "Set TICKTICK_ACCESS_TOKEN or TICKTICK_TOKEN."
            )
        return {"Authorization": f"Bearer {token}"}

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Issue a single request and return the decoded JSON body.

        Returns:
            Parsed JSON, or None when the response has no body.

        Raises:
            TickTickConfigurationError: No token configured.
            TickTickAPIError: Upstream answered with a non-2xx status.
            TickTickNetworkError: The request could not be completed.
        """
        headers = self._auth_headers()
        logger.debug("%s %s params=%s", method, path, params)

        try:
            response = await self._http.request(
                method,
                path,
                params=params or None,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning("Request %s %s failed: %s", method, path, e)
            raise TickTickNetworkError(
                f"Could not reach TickTick API: {e}",
                details={"method": method, "path": path},
            ) from e

        if response.is_success:
            return _decode(response)

        body = _decode_error(response)
        message = _error_message(body, response)
        logger.warning("%s %s returned %s: %s", method, path, response.status_code, message)
        error_cls = api_error_for_status(response.status_code)
        raise error_cls(
            message,
            status_code=response.status_code,
            body=body,
            method=method,
            path=path,
        )


def _decode(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        # Some endpoints answer with plain text (e.g. "true")
        return response.text


def _decode_error(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(body: Any, response: httpx.Response) -> str:
    if isinstance(body, dict):
        for key in ("errorMessage", "error_description", "message", "error"):
            if body.get(key):
                return str(body[key])
    if isinstance(body, str) and body.strip():
        return body.strip()
    return response.reason_phrase or "Unknown error"
