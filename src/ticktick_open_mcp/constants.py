"""Constants shared across the TickTick Open API MCP server."""

from __future__ import annotations

from enum import IntEnum

DEFAULT_BASE_URL = "https://api.ticktick.com/open/v1"
DEFAULT_TIMEOUT = 30.0
SERVER_NAME = "ticktick-open-mcp"


class TaskPriority(IntEnum):
    """TickTick priority levels."""

    NONE = 0
    LOW = 1
    MEDIUM = 3
    HIGH = 5


class TaskStatus(IntEnum):
    """TickTick task status values."""

    ACTIVE = 0
    COMPLETED = 2


PRIORITY_LABELS = {
    TaskPriority.NONE: "None",
    TaskPriority.LOW: "Low",
    TaskPriority.MEDIUM: "Medium",
    TaskPriority.HIGH: "High",
}

STATUS_LABELS = {
    TaskStatus.ACTIVE: "Active",
    TaskStatus.COMPLETED: "Completed",
}
