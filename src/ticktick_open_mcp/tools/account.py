"""User account, preference and statistics tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import detail, summary
from ticktick_open_mcp.tools.inputs import (
    DateRangeInput,
    NoArgsInput,
    PreferencesUpdateInput,
    StatsPeriodInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    ToolSpec(
        name="ticktick_get_user_profile",
        title="User Profile",
        description="Get the user's profile: name, email, time zone and subscription.",
        input_model=NoArgsInput,
        method="GET",
        path="/user/profile",
        formatter=detail("user", "User Profile"),
    ),
    ToolSpec(
        name="ticktick_get_user_status",
        title="User Status",
        description="Get account status such as Pro subscription and team membership.",
        input_model=NoArgsInput,
        method="GET",
        path="/user/status",
        formatter=summary("Account Status"),
    ),
    ToolSpec(
        name="ticktick_get_user_preferences",
        title="User Preferences",
        description="Get the user's preferences (time zone, week start, formats, defaults).",
        input_model=NoArgsInput,
        method="GET",
        path="/user/preferences",
        formatter=summary("Preferences"),
    ),
    ToolSpec(
        name="ticktick_update_user_preferences",
        title="Update Preferences",
        description="Update the provided user preferences.",
        input_model=PreferencesUpdateInput,
        method="PUT",
        path="/user/preferences",
        formatter=summary("Preferences Updated"),
    ),
    ToolSpec(
        name="ticktick_get_productivity_stats",
        title="Productivity Statistics",
        description="Get overall productivity statistics: score, level, completed task counts.",
        input_model=NoArgsInput,
        method="GET",
        path="/statistics/general",
        formatter=summary("Productivity Statistics"),
    ),
    ToolSpec(
        name="ticktick_get_completion_trends",
        title="Completion Trends",
        description="Get task completion trends for a day, week, month or year.",
        input_model=StatsPeriodInput,
        method="GET",
        path="/statistics/trend",
        query=("period",),
        formatter=summary("Completion Trends"),
    ),
    ToolSpec(
        name="ticktick_get_task_statistics",
        title="Task Statistics",
        description="Get task creation and completion counts between two dates.",
        input_model=DateRangeInput,
        method="GET",
        path="/statistics/task",
        query=("from_date", "to_date"),
        formatter=summary("Task Statistics"),
    ),
    ToolSpec(
        name="ticktick_get_user_ranking",
        title="User Ranking",
        description="Get the user's achievement ranking and score.",
        input_model=NoArgsInput,
        method="GET",
        path="/user/ranking",
        formatter=summary("Ranking"),
    ),
]
