"""
MCP Server Wiring Tests.

This module tests the low-level MCP server built around the dispatcher:
- tools/list and tools/call handlers
- Protocol errors reaching the client as JSON-RPC errors
- Logging configuration
- Exit status of the console entry point
"""

from __future__ import annotations

import logging

import pytest
from mcp import types
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session

from tests.factories import ALL_TOOLS, FakeTickTick
from ticktick_open_mcp import __version__
from ticktick_open_mcp import server as server_module
from ticktick_open_mcp.dispatcher import ToolDispatcher
from ticktick_open_mcp.server import configure_logging, create_server
from ticktick_open_mcp.settings import Settings

pytestmark = [pytest.mark.server, pytest.mark.unit]


def call_request(name: str, arguments: dict | None = None) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


# =============================================================================
# Handler Tests
# =============================================================================


class TestHandlers:
    """Tests calling the registered request handlers directly."""

    def test_handlers_registered(self, dispatcher: ToolDispatcher):
        """Test that both tool handlers are installed."""
        server = create_server(dispatcher)

        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers
        assert server.version == __version__

    async def test_list_tools(self, dispatcher: ToolDispatcher):
        """Test the tools/list result."""
        server = create_server(dispatcher)

        result = await server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list"))

        assert [tool.name for tool in result.root.tools] == ALL_TOOLS

    async def test_call_tool(self, dispatcher: ToolDispatcher, fake_api: FakeTickTick):
        """Test a successful tools/call."""
        fake_api.respond(200, {"id": "T1", "title": "Hello"})
        server = create_server(dispatcher)

        result = await server.request_handlers[types.CallToolRequest](call_request("ticktick_get_task", {"task_id": "T1"}))

        assert result.root.isError is False
        assert len(result.root.content) == 1
        assert result.root.content[0].type == "text"
        assert "Hello" in result.root.content[0].text

    async def test_call_unknown_tool_raises(self, dispatcher: ToolDispatcher):
        """Test that protocol errors propagate out of the handler."""
        server = create_server(dispatcher)

        with pytest.raises(McpError) as exc_info:
            await server.request_handlers[types.CallToolRequest](call_request("ticktick_nope", {}))

        assert exc_info.value.error.code == types.METHOD_NOT_FOUND


# =============================================================================
# Session Tests
# =============================================================================


class TestSession:
    """Tests through an in-memory client session."""

    async def test_initialize_and_list(self, dispatcher: ToolDispatcher):
        """Test that a client sees the whole catalogue."""
        server = create_server(dispatcher)

        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_tools()

        assert len(result.tools) == 112

    async def test_call_over_session(self, dispatcher: ToolDispatcher, fake_api: FakeTickTick):
        """Test a tool call round trip."""
        fake_api.respond(200, [{"id": "P1", "name": "Inbox"}])
        server = create_server(dispatcher)

        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("ticktick_get_projects", {})

        assert not result.isError
        assert "Inbox" in result.content[0].text
        fake_api.assert_called("GET", "/project")

    async def test_invalid_arguments_over_session(self, dispatcher: ToolDispatcher, fake_api: FakeTickTick):
        """Test that validation failures arrive as JSON-RPC errors."""
        server = create_server(dispatcher)

        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError) as exc_info:
                await session.call_tool("ticktick_get_task", {})

        assert exc_info.value.error.code == types.INVALID_REQUEST
        fake_api.assert_not_called()


# =============================================================================
# Logging Tests
# =============================================================================


class TestLogging:
    """Tests for logging configuration."""

    def test_configure_logging_level(self, monkeypatch):
        """Test that the configured level is applied to the root logger."""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        configure_logging("debug")

        assert root.level == logging.DEBUG
        assert root.handlers

    def test_unknown_level_defaults_to_info(self, monkeypatch):
        """Test the fallback for unknown level names."""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        configure_logging("chatty")

        assert root.level == logging.INFO


# =============================================================================
# Entry Point Tests
# =============================================================================


class TestMain:
    """Tests for the console entry point's exit behaviour."""

    @pytest.fixture(autouse=True)
    def quiet_startup(self, monkeypatch, settings: Settings):
        monkeypatch.setattr(server_module, "get_settings", lambda: settings)
        monkeypatch.setattr(server_module, "configure_logging", lambda level: None)

    def test_failure_exits_with_status_one(self, monkeypatch, caplog):
        """Test that a crashed server logs the error and exits non-zero."""

        def crash(settings):
            raise RuntimeError("stdio closed")

        monkeypatch.setattr(server_module, "serve", crash)

        with caplog.at_level(logging.ERROR, logger="ticktick_open_mcp.server"):
            with pytest.raises(SystemExit) as exc_info:
                server_module.main()

        assert exc_info.value.code == 1
        assert "TickTick MCP server failed" in caplog.text
        assert "stdio closed" in caplog.text

    def test_keyboard_interrupt_returns_cleanly(self, monkeypatch, caplog):
        """Test that Ctrl-C shuts down without an error exit."""

        def interrupt(settings):
            raise KeyboardInterrupt

        monkeypatch.setattr(server_module, "serve", interrupt)

        with caplog.at_level(logging.INFO, logger="ticktick_open_mcp.server"):
            assert server_module.main() is None

        assert "Interrupted, shutting down" in caplog.text
