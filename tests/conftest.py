"""
Pytest Configuration and Fixtures for the TickTick MCP Server Tests.

This module provides shared fixtures and configuration for all tests.

Architecture:
    - Fixtures: settings, fake upstream, client, dispatcher and registry
    - Markers: custom pytest markers for test categorization
    - Test doubles live in ``tests/factories.py``
"""

from __future__ import annotations

from typing import AsyncIterator

import pytest

from tests.factories import BASE_URL, TEST_TOKEN, FakeTickTick
from ticktick_open_mcp.client import TickTickClient
from ticktick_open_mcp.dispatcher import ToolDispatcher
from ticktick_open_mcp.settings import Settings
from ticktick_open_mcp.tools import ToolRegistry, build_registry

ENV_VARS = (
    "TICKTICK_ACCESS_TOKEN",
    "TICKTICK_TOKEN",
    "TICKTICK_CLIENT_ID",
    "TICKTICK_CLIENT_SECRET",
    "TICKTICK_AUTH_CODE",
    "TICKTICK_BASE_URL",
    "TICKTICK_TIMEOUT",
    "TICKTICK_LOG_LEVEL",
)


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "registry: Tool registry tests")
    config.addinivalue_line("markers", "dispatch: Dispatcher contract tests")
    config.addinivalue_line("markers", "mapping: Request mapping tests")
    config.addinivalue_line("markers", "formatting: Response formatting tests")
    config.addinivalue_line("markers", "client: HTTP client tests")
    config.addinivalue_line("markers", "settings: Configuration tests")
    config.addinivalue_line("markers", "server: MCP server wiring tests")
    config.addinivalue_line("markers", "errors: Error handling tests")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's TICKTICK_* variables out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    """Settings with a token, pointing at the fake upstream."""
    return Settings(_env_file=None, access_token=TEST_TOKEN, base_url=BASE_URL)


@pytest.fixture
def anonymous_settings() -> Settings:
    """Settings without any access token."""
    return Settings(_env_file=None, base_url=BASE_URL)


@pytest.fixture
def fake_api() -> FakeTickTick:
    """Fresh fake upstream for each test."""
    return FakeTickTick()


@pytest.fixture
async def client(settings: Settings, fake_api: FakeTickTick) -> AsyncIterator[TickTickClient]:
    """TickTickClient wired to the fake upstream."""
    async with TickTickClient(settings, transport=fake_api.transport) as c:
        yield c


@pytest.fixture
async def anonymous_client(anonymous_settings: Settings, fake_api: FakeTickTick) -> AsyncIterator[TickTickClient]:
    async with TickTickClient(anonymous_settings, transport=fake_api.transport) as c:
        yield c


@pytest.fixture
def registry() -> ToolRegistry:
    return build_registry()


@pytest.fixture
def dispatcher(client: TickTickClient, registry: ToolRegistry) -> ToolDispatcher:
    """Dispatcher over the full catalogue, talking to the fake upstream."""
    return ToolDispatcher(client, registry)


@pytest.fixture
def anonymous_dispatcher(anonymous_client: TickTickClient, registry: ToolRegistry) -> ToolDispatcher:
    return ToolDispatcher(anonymous_client, registry)
