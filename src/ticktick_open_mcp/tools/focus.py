"""Focus / Pomodoro tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import (
    confirmation,
    detail,
    format_focus_status,
    listing,
    summary,
)
from ticktick_open_mcp.tools.inputs import (
    DateRangeInput,
    FocusHistoryInput,
    FocusRecordIdInput,
    FocusStartInput,
    NoArgsInput,
    StatsPeriodInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    ToolSpec(
        name="ticktick_start_focus",
        title="Start Focus",
        description="Start a focus session (25 minute pomodoro by default), optionally linked to a task.",
        input_model=FocusStartInput,
        method="POST",
        path="/focus/start",
        formatter=detail("focus", "Focus Started"),
    ),
    ToolSpec(
        name="ticktick_stop_focus",
        title="Stop Focus",
        description="Stop the running focus session and record it.",
        input_model=NoArgsInput,
        method="POST",
        path="/focus/stop",
        formatter=detail("focus", "Focus Stopped"),
    ),
    ToolSpec(
        name="ticktick_pause_focus",
        title="Pause Focus",
        description="Pause the running focus session.",
        input_model=NoArgsInput,
        method="POST",
        path="/focus/pause",
        formatter=confirmation("⏸️ Focus session paused."),
    ),
    ToolSpec(
        name="ticktick_resume_focus",
        title="Resume Focus",
        description="Resume a paused focus session.",
        input_model=NoArgsInput,
        method="POST",
        path="/focus/resume",
        formatter=confirmation("▶️ Focus session resumed."),
    ),
    ToolSpec(
        name="ticktick_get_focus_status",
        title="Focus Status",
        description="Show the focus session currently in progress, if any.",
        input_model=NoArgsInput,
        method="GET",
        path="/focus/current",
        formatter=format_focus_status,
    ),
    ToolSpec(
        name="ticktick_get_focus_history",
        title="Focus History",
        description="List past focus sessions, optionally within a date range.",
        input_model=FocusHistoryInput,
        method="GET",
        path="/focus/history",
        query=("from_date", "to_date", "limit"),
        formatter=listing("focus", "Focus History"),
    ),
    ToolSpec(
        name="ticktick_get_focus_stats",
        title="Focus Statistics",
        description="Get focus totals (time, pomodoros) for a day, week, month or year.",
        input_model=StatsPeriodInput,
        method="GET",
        path="/focus/stats",
        query=("period",),
        formatter=summary("Focus Statistics"),
    ),
    ToolSpec(
        name="ticktick_get_focus_heatmap",
        title="Focus Heatmap",
        description="Get daily focus durations between two dates for a heatmap.",
        input_model=DateRangeInput,
        method="GET",
        path="/focus/heatmap",
        query=("from_date", "to_date"),
        formatter=summary("Focus Heatmap"),
    ),
    ToolSpec(
        name="ticktick_get_focus_distribution",
        title="Focus Distribution",
        description="Get how focus time is distributed across tags and projects between two dates.",
        input_model=DateRangeInput,
        method="GET",
        path="/focus/distribution",
        query=("from_date", "to_date"),
        formatter=summary("Focus Distribution"),
    ),
    ToolSpec(
        name="ticktick_delete_focus_record",
        title="Delete Focus Record",
        description="Delete a recorded focus session.",
        input_model=FocusRecordIdInput,
        method="DELETE",
        path="/focus/record/{record_id}",
        formatter=confirmation("🗑️ Focus record `{record_id}` deleted."),
    ),
]
