"""Habit tracking tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import (
    confirmation,
    detail,
    format_habit_checkins,
    listing,
    summary,
)
from ticktick_open_mcp.tools.inputs import (
    HabitCheckinInput,
    HabitCheckinsInput,
    HabitCreateInput,
    HabitIdInput,
    HabitListInput,
    HabitUpdateInput,
    NoArgsInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    ToolSpec(
        name="ticktick_get_habits",
        title="List Habits",
        description="List habits with their streaks; archived habits only when include_archived is true.",
        input_model=HabitListInput,
        method="GET",
        path="/habit",
        query=("include_archived",),
        formatter=listing("habit", "Habits"),
    ),
    ToolSpec(
        name="ticktick_get_habit",
        title="Get Habit",
        description="Get a habit with its goal, repeat rule and streak.",
        input_model=HabitIdInput,
        method="GET",
        path="/habit/{habit_id}",
        formatter=detail("habit", "Habit"),
    ),
    ToolSpec(
        name="ticktick_create_habit",
        title="Create Habit",
        description=(
            "Create a habit. Type 'Boolean' is done/not-done; 'Real' tracks a quantity "
            "towards a daily goal with an optional step and unit."
        ),
        input_model=HabitCreateInput,
        method="POST",
        path="/habit",
        formatter=detail("habit", "Habit Created"),
    ),
    ToolSpec(
        name="ticktick_update_habit",
        title="Update Habit",
        description="Update the provided fields of a habit.",
        input_model=HabitUpdateInput,
        method="PUT",
        path="/habit/{habit_id}",
        formatter=detail("habit", "Habit Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_habit",
        title="Delete Habit",
        description="Delete a habit and its check-in history.",
        input_model=HabitIdInput,
        method="DELETE",
        path="/habit/{habit_id}",
        formatter=confirmation("🗑️ Habit `{habit_id}` deleted."),
    ),
    ToolSpec(
        name="ticktick_checkin_habit",
        title="Check In Habit",
        description="Record a habit check-in for a day (YYYYMMDD) with an optional value.",
        input_model=HabitCheckinInput,
        method="POST",
        path="/habit/{habit_id}/checkin",
        formatter=detail("checkin", "Habit Checked In"),
    ),
    ToolSpec(
        name="ticktick_get_habit_checkins",
        title="Habit Check-ins",
        description="List check-ins for one or more habits, optionally after a given day.",
        input_model=HabitCheckinsInput,
        method="GET",
        path="/habit/checkins",
        query=("habit_ids", "after_stamp"),
        formatter=format_habit_checkins,
    ),
    ToolSpec(
        name="ticktick_get_habit_stats",
        title="Habit Statistics",
        description="Get completion statistics for a habit.",
        input_model=HabitIdInput,
        method="GET",
        path="/habit/{habit_id}/stats",
        formatter=summary("Habit Statistics"),
    ),
    ToolSpec(
        name="ticktick_archive_habit",
        title="Archive Habit",
        description="Archive a habit.",
        input_model=HabitIdInput,
        method="POST",
        path="/habit/{habit_id}/archive",
        formatter=confirmation("📦 Habit `{habit_id}` archived."),
    ),
    ToolSpec(
        name="ticktick_unarchive_habit",
        title="Unarchive Habit",
        description="Restore an archived habit.",
        input_model=HabitIdInput,
        method="POST",
        path="/habit/{habit_id}/unarchive",
        formatter=confirmation("📂 Habit `{habit_id}` restored."),
    ),
    ToolSpec(
        name="ticktick_get_habit_sections",
        title="Habit Sections",
        description="List habit sections (e.g., Morning, Afternoon, Night).",
        input_model=NoArgsInput,
        method="GET",
        path="/habit/section",
        formatter=listing("habit_section", "Habit Sections"),
    ),
]
