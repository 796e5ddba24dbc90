#!/usr/bin/env python3
"""
TickTick MCP Server.

This server exposes the TickTick Open API as MCP tools over stdio
(line-delimited JSON-RPC 2.0). Each tool performs one authenticated HTTP
request and returns a markdown summary of the response.

Environment Variables:
    TICKTICK_ACCESS_TOKEN or TICKTICK_TOKEN (one is required for tool calls)
    TICKTICK_CLIENT_ID, TICKTICK_CLIENT_SECRET, TICKTICK_AUTH_CODE (optional)
    TICKTICK_BASE_URL, TICKTICK_TIMEOUT, TICKTICK_LOG_LEVEL (optional)
"""

from __future__ import annotations

import asyncio
import logging
import sys

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ticktick_open_mcp import __version__
from ticktick_open_mcp.client import TickTickClient
from ticktick_open_mcp.constants import SERVER_NAME
from ticktick_open_mcp.dispatcher import ToolDispatcher
from ticktick_open_mcp.settings import Settings, get_settings

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Tools for the TickTick task manager: projects, tasks, checklists, tags, "
    "filters, habits, focus sessions, calendar, sharing, teams and templates. "
    "Task priorities are 0 (none), 1 (low), 3 (medium), 5 (high)."
)


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr; stdout carries the protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build the MCP server wired to a dispatcher."""
    server: Server = Server(SERVER_NAME, version=__version__, instructions=INSTRUCTIONS)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        text = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=False)
        )

    # Registered directly so McpError reaches the host as a JSON-RPC error
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(settings: Settings) -> None:
    """Run the server on stdio until the host closes the streams."""
    if not settings.has_credentials:
        logger.warning(
            "No TickTick access token configured; every tool call will fail. "
            "Set TICKTICK_ACCESS_TOKEN or TICKTICK_TOKEN."
        )
    elif settings.has_oauth_app:
        logger.info("OAuth client %s configured", settings.client_id)

    async with TickTickClient(settings) as client:
        dispatcher = ToolDispatcher(client)
        server = create_server(dispatcher)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("TickTick MCP server ready with %d tools", len(dispatcher.registry))
            await server.run(read_stream, write_stream, server.create_initialization_options())


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    """Main entry point for the TickTick MCP server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s %s against %s", SERVER_NAME, __version__, settings.base_url)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("TickTick MCP server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
