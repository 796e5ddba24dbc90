"""
TickTick MCP Tools Package.

This package declares every MCP tool exposed by the server. Tools are
organized into logical groups:
    - Project tools (CRUD, archive, folders, kanban columns)
    - Task tools (CRUD, complete, move, search, batch, checklists, trash)
    - Tag tools (CRUD, rename, merge) and saved filters
    - Habit tools (CRUD, check-ins, statistics)
    - Focus tools (pomodoro control, history, statistics)
    - Calendar tools (events, subscriptions)
    - Collaboration tools (sharing, comments, teams)
    - Template tools
    - Account tools (profile, preferences, statistics)
"""

from ticktick_open_mcp.tools import (
    account,
    calendar,
    collaboration,
    focus,
    habits,
    projects,
    tags,
    tasks,
    templates,
)
from ticktick_open_mcp.tools.registry import ToolRegistry, ToolSpec, UpstreamRequest

TOOL_GROUPS = (
    projects.TOOLS,
    tasks.TOOLS,
    tags.TOOLS,
    habits.TOOLS,
    focus.TOOLS,
    calendar.TOOLS,
    collaboration.TOOLS,
    templates.TOOLS,
    account.TOOLS,
)


def build_registry() -> ToolRegistry:
    """Build the registry of every TickTick tool, in catalogue order."""
    return ToolRegistry(spec for group in TOOL_GROUPS for spec in group)


__all__ = [
    "TOOL_GROUPS",
    "ToolRegistry",
    "ToolSpec",
    "UpstreamRequest",
    "build_registry",
]
