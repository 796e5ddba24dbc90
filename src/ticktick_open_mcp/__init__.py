"""
TickTick Open API MCP Server.

This package exposes the TickTick Open API (https://api.ticktick.com/open/v1)
as Model Context Protocol tools over stdio.

Architecture:
    MCP Server (stdio, tools/list + tools/call)
         │
         ▼
    ToolDispatcher (validation, error mapping)
         │
         ▼
    ToolRegistry (tool name -> schema, request template, formatter)
         │
         ▼
    TickTickClient (one authenticated HTTP call per tool)
"""

__version__ = "0.2.0"
__author__ = "TickTick MCP Contributors"

from ticktick_open_mcp.exceptions import (
    TickTickError,
    TickTickAPIError,
    TickTickAuthenticationError,
    TickTickConfigurationError,
    TickTickNetworkError,
    TickTickNotFoundError,
    TickTickRateLimitError,
)

__all__ = [
    "__version__",
    "TickTickError",
    "TickTickAPIError",
    "TickTickAuthenticationError",
    "TickTickConfigurationError",
    "TickTickNetworkError",
    "TickTickNotFoundError",
    "TickTickRateLimitError",
]
