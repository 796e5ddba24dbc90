"""
Tool dispatcher.

Routes a ``tools/call`` to its ToolSpec: validate arguments, build one
upstream request, send it, render the response. This is the only place
where failures become MCP protocol errors:

    unknown tool              -> METHOD_NOT_FOUND
    invalid arguments         -> INVALID_REQUEST
    missing access token      -> INVALID_REQUEST
    upstream/transport error  -> INTERNAL_ERROR
"""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from ticktick_open_mcp.client import TickTickClient
from ticktick_open_mcp.exceptions import (
    TickTickAPIError,
    TickTickConfigurationError,
    TickTickError,
)
from ticktick_open_mcp.tools import ToolRegistry, ToolSpec, UpstreamRequest, build_registry
from ticktick_open_mcp.tools.inputs import BaseMCPInput

logger = logging.getLogger(__name__)


def _error(code: int, message: str, data: Any = None) -> McpError:
    return McpError(types.ErrorData(code=code, message=message, data=data))


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into 'field: problem; ...'."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


class ToolDispatcher:
    """
    Stateless dispatcher from tool name + arguments to formatted text.

    Usage:
        async with TickTickClient(settings) as client:
            dispatcher = ToolDispatcher(client)
            text = await dispatcher.call_tool("ticktick_get_task", {"task_id": "T1"})
    """

    def __init__(self, client: TickTickClient, registry: ToolRegistry | None = None) -> None:
        self._client = client
        self._registry = registry if registry is not None else build_registry()

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> list[types.Tool]:
        return [spec.to_mcp_tool() for spec in self._registry]

    def resolve(self, name: str) -> ToolSpec:
        spec = self._registry.get(name)
        if spec is None:
            raise _error(types.METHOD_NOT_FOUND, f"Unknown tool: {name}")
        return spec

    def prepare(self, name: str, arguments: dict[str, Any] | None) -> tuple[ToolSpec, BaseMCPInput, UpstreamRequest]:
        """Resolve and validate a call without touching the network."""
        spec = self.resolve(name)
        try:
            params = spec.validate_arguments(arguments or {})
        except ValidationError as e:
            raise _error(
                types.INVALID_REQUEST,
                f"Invalid arguments for {name}: {describe_validation_error(e)}",
            ) from e
        return spec, params, spec.build_request(params)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        spec, params, request = self.prepare(name, arguments)
        logger.debug("Tool %s -> %s %s", name, request.method, request.path)

        try:
            data = await self._client.request(
                request.method,
                request.path,
                params=request.params,
                json=request.body,
            )
        except TickTickConfigurationError as e:
            raise _error(types.INVALID_REQUEST, str(e)) from e
        except TickTickAPIError as e:
            raise _error(
                types.INTERNAL_ERROR,
                f"{name} failed: {e}",
                {"status": e.status_code, "body": e.body},
            ) from e
        except TickTickError as e:
            raise _error(types.INTERNAL_ERROR, f"{name} failed: {e}") from e

        try:
            return spec.render(data, params)
        except Exception as e:
            logger.exception("Error formatting %s response", name)
            raise _error(types.INTERNAL_ERROR, f"{name} failed: could not format response: {e}") from e
