"""
Pydantic Input Models for TickTick MCP Tools.

This module defines every argument shape accepted by the MCP tools. The JSON
Schema advertised by ``tools/list`` is generated from these models, and the
same models validate ``tools/call`` arguments.

Field names are snake_case; request builders camelCase them for the API.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Priority = Literal[0, 1, 3, 5]
DATE_STAMP = r"^\d{8}$"
EMAIL = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    MARKDOWN = "markdown"
    JSON = "json"


class PayloadModel(BaseModel):
    """Base for every argument shape, including nested list items."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )


class BaseMCPInput(PayloadModel):
    """Base input model for a tool call."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable, 'json' for the raw API response",
    )


# Fields that never leave the server.
LOCAL_FIELDS = frozenset({"response_format"})


class NoArgsInput(BaseMCPInput):
    """Input for tools that take no arguments."""


# =============================================================================
# Shared Identifier Inputs
# =============================================================================


class ProjectIdInput(BaseMCPInput):
    """Input addressing a single project."""

    project_id: str = Field(..., description="Project identifier", min_length=1)


class TaskIdInput(BaseMCPInput):
    """Input addressing a single task."""

    task_id: str = Field(..., description="Task identifier", min_length=1)


class ProjectTaskInput(BaseMCPInput):
    """Input addressing a task inside a project."""

    project_id: str = Field(..., description="Project ID the task belongs to", min_length=1)
    task_id: str = Field(..., description="Task identifier", min_length=1)


class DateRangeInput(BaseMCPInput):
    """Input for a required date range."""

    from_date: str = Field(
        ...,
        description="Start of the range (e.g., '2025-01-01')",
        min_length=1,
    )
    to_date: str = Field(
        ...,
        description="End of the range (e.g., '2025-01-31')",
        min_length=1,
    )


class StatsPeriodInput(BaseMCPInput):
    """Input for period-based statistics."""

    period: Literal["day", "week", "month", "year"] = Field(
        default="week",
        description="Aggregation period",
    )


# =============================================================================
# Project Input Models
# =============================================================================


class ProjectCreateInput(BaseMCPInput):
    """Input for creating a project."""

    name: str = Field(
        ...,
        description="Project name (e.g., 'Work', 'Personal', 'Shopping')",
        min_length=1,
        max_length=100,
    )
    color: Optional[str] = Field(
        default=None,
        description="Hex color code (e.g., '#F18181', '#86BB6D')",
        pattern=r"^#[0-9A-Fa-f]{6}$",
    )
    view_mode: Optional[Literal["list", "kanban", "timeline"]] = Field(
        default=None,
        description="View mode: 'list', 'kanban', 'timeline'",
    )
    kind: Optional[Literal["TASK", "NOTE"]] = Field(
        default=None,
        description="Project type: 'TASK' for tasks, 'NOTE' for notes",
    )
    group_id: Optional[str] = Field(
        default=None,
        description="Folder (project group) ID to place the project in",
    )
    sort_order: Optional[int] = Field(default=None, description="Sort order value")


class ProjectUpdateInput(BaseMCPInput):
    """Input for updating a project."""

    project_id: str = Field(..., description="Project identifier to update", min_length=1)
    name: Optional[str] = Field(default=None, description="New project name", min_length=1, max_length=100)
    color: Optional[str] = Field(
        default=None,
        description="New hex color code",
        pattern=r"^#[0-9A-Fa-f]{6}$",
    )
    view_mode: Optional[Literal["list", "kanban", "timeline"]] = Field(default=None, description="New view mode")
    kind: Optional[Literal["TASK", "NOTE"]] = Field(default=None, description="New project type")
    group_id: Optional[str] = Field(default=None, description="New folder ID")
    sort_order: Optional[int] = Field(default=None, description="New sort order value")


class FolderCreateInput(BaseMCPInput):
    """Input for creating a folder (project group)."""

    name: str = Field(..., description="Folder name", min_length=1, max_length=100)


class FolderIdInput(BaseMCPInput):
    """Input for deleting a folder."""

    folder_id: str = Field(..., description="Folder identifier", min_length=1)


class ColumnCreateInput(BaseMCPInput):
    """Input for creating a kanban column."""

    project_id: str = Field(..., description="Project the column belongs to", min_length=1)
    name: str = Field(..., description="Column name (e.g., 'To Do', 'Doing')", min_length=1, max_length=100)
    sort_order: Optional[int] = Field(default=None, description="Sort order value")


class ColumnRefInput(BaseMCPInput):
    """Input addressing a kanban column."""

    project_id: str = Field(..., description="Project the column belongs to", min_length=1)
    column_id: str = Field(..., description="Column identifier", min_length=1)


class TaskColumnMoveInput(BaseMCPInput):
    """Input for moving a task to a kanban column."""

    project_id: str = Field(..., description="Project ID the task belongs to", min_length=1)
    task_id: str = Field(..., description="Task identifier", min_length=1)
    column_id: str = Field(..., description="Destination column identifier", min_length=1)


# =============================================================================
# Task Input Models
# =============================================================================


class ChecklistItem(PayloadModel):
    """A checklist (subtask) item embedded in a task."""

    title: str = Field(..., description="Checklist item title", min_length=1)
    status: Optional[Literal[0, 1]] = Field(default=None, description="0 = open, 1 = checked")
    start_date: Optional[str] = Field(default=None, description="Start date in ISO format")
    is_all_day: Optional[bool] = Field(default=None, description="All-day item")
    sort_order: Optional[int] = Field(default=None, description="Sort order value")


class NewTask(PayloadModel):
    """Fields of a task to create."""

    title: str = Field(
        ...,
        description="Task title (e.g., 'Review quarterly report', 'Buy groceries')",
        min_length=1,
        max_length=500,
    )
    content: Optional[str] = Field(
        default=None,
        description="Task notes/content (supports markdown)",
        max_length=10000,
    )
    desc: Optional[str] = Field(default=None, description="Checklist description", max_length=5000)
    project_id: Optional[str] = Field(
        default=None,
        description="Project ID to create the task in. If not provided, uses inbox.",
    )
    priority: Priority = Field(
        default=0,
        description="Priority level: 0 (none), 1 (low), 3 (medium), 5 (high)",
    )
    status: Literal[0, 2] = Field(default=0, description="0 = active, 2 = completed")
    start_date: Optional[str] = Field(
        default=None,
        description="Start date in ISO format (e.g., '2025-01-15T09:00:00+0000')",
    )
    due_date: Optional[str] = Field(
        default=None,
        description="Due date in ISO format (e.g., '2025-01-15T17:00:00+0000')",
    )
    time_zone: Optional[str] = Field(default=None, description="IANA timezone (e.g., 'America/New_York')")
    is_all_day: Optional[bool] = Field(default=None, description="Whether this is an all-day task")
    tags: Optional[List[str]] = Field(
        default=None,
        description="List of tag names to apply (e.g., ['work', 'urgent'])",
        max_length=20,
    )
    reminders: Optional[List[str]] = Field(
        default=None,
        description="Reminder triggers in iCal format (e.g., 'TRIGGER:-PT30M' for 30 min before)",
        max_length=10,
    )
    repeat_flag: Optional[str] = Field(
        default=None,
        description="Recurrence rule in RRULE format (e.g., 'RRULE:FREQ=DAILY;INTERVAL=1')",
    )
    items: Optional[List[ChecklistItem]] = Field(default=None, description="Checklist items")


class TaskChanges(PayloadModel):
    """Fields of a task to update; only provided fields are sent."""

    task_id: str = Field(..., description="Task identifier to update", min_length=1)
    project_id: Optional[str] = Field(default=None, description="Project ID the task belongs to")
    title: Optional[str] = Field(default=None, description="New task title", min_length=1, max_length=500)
    content: Optional[str] = Field(default=None, description="New task content", max_length=10000)
    desc: Optional[str] = Field(default=None, description="New checklist description", max_length=5000)
    priority: Optional[Priority] = Field(default=None, description="New priority: 0, 1, 3 or 5")
    start_date: Optional[str] = Field(default=None, description="New start date in ISO format")
    due_date: Optional[str] = Field(default=None, description="New due date in ISO format")
    time_zone: Optional[str] = Field(default=None, description="New IANA timezone")
    is_all_day: Optional[bool] = Field(default=None, description="All-day flag")
    tags: Optional[List[str]] = Field(
        default=None,
        description="New list of tags (replaces existing)",
        max_length=20,
    )
    reminders: Optional[List[str]] = Field(default=None, description="New reminder triggers", max_length=10)
    repeat_flag: Optional[str] = Field(default=None, description="New RRULE recurrence")


class TaskRef(PayloadModel):
    """A task reference inside a batch."""

    task_id: str = Field(..., description="Task identifier", min_length=1)
    project_id: str = Field(..., description="Project ID the task belongs to", min_length=1)


class TaskCreateInput(BaseMCPInput, NewTask):
    """Input for creating a new task."""


class TaskUpdateInput(BaseMCPInput, TaskChanges):
    """Input for updating a task."""


class TaskListInput(BaseMCPInput):
    """Input for listing tasks."""

    project_id: Optional[str] = Field(
        default=None,
        description="Filter by project ID. If not provided, returns tasks of all projects.",
    )
    status: Optional[Literal[0, 2]] = Field(default=None, description="Filter by status: 0 active, 2 completed")


class TaskMoveInput(BaseMCPInput):
    """Input for moving a task between projects."""

    task_id: str = Field(..., description="Task identifier to move", min_length=1)
    from_project_id: str = Field(..., description="Source project ID", min_length=1)
    to_project_id: str = Field(..., description="Destination project ID", min_length=1)


class TaskSearchInput(BaseMCPInput):
    """Input for searching tasks."""

    keyword: str = Field(
        ...,
        description="Search text matched against title and content",
        min_length=1,
        max_length=200,
    )
    project_id: Optional[str] = Field(default=None, description="Restrict search to one project")


class UpcomingTasksInput(BaseMCPInput):
    """Input for listing upcoming tasks."""

    days: int = Field(default=7, description="Number of days to look ahead", ge=1, le=90)


class CompletedTasksInput(BaseMCPInput):
    """Input for listing completed tasks."""

    from_date: Optional[str] = Field(default=None, description="Completed on or after (e.g., '2025-01-01')")
    to_date: Optional[str] = Field(default=None, description="Completed on or before (e.g., '2025-01-31')")
    limit: int = Field(default=50, description="Maximum number of tasks to return", ge=1, le=200)


class BatchTaskCreateInput(BaseMCPInput):
    """Input for creating several tasks at once."""

    tasks: List[NewTask] = Field(..., description="Tasks to create", min_length=1, max_length=50)


class BatchTaskUpdateInput(BaseMCPInput):
    """Input for updating several tasks at once."""

    tasks: List[TaskChanges] = Field(..., description="Task updates", min_length=1, max_length=50)


class BatchTaskDeleteInput(BaseMCPInput):
    """Input for deleting several tasks at once."""

    tasks: List[TaskRef] = Field(..., description="Tasks to delete", min_length=1, max_length=50)


class TaskDuplicateInput(BaseMCPInput):
    """Input for duplicating a task."""

    task_id: str = Field(..., description="Task identifier to duplicate", min_length=1)
    project_id: Optional[str] = Field(default=None, description="Project for the copy (defaults to the original's)")


# =============================================================================
# Subtask / Checklist Input Models
# =============================================================================


class TaskParentInput(BaseMCPInput):
    """Input for setting a task's parent (making it a subtask)."""

    task_id: str = Field(..., description="Task identifier to make a subtask", min_length=1)
    parent_id: str = Field(..., description="Parent task identifier", min_length=1)
    project_id: str = Field(..., description="Project ID containing both tasks", min_length=1)


class ChecklistAddInput(BaseMCPInput):
    """Input for adding a checklist item to a task."""

    task_id: str = Field(..., description="Task identifier", min_length=1)
    title: str = Field(..., description="Checklist item title", min_length=1, max_length=500)
    start_date: Optional[str] = Field(default=None, description="Start date in ISO format")
    is_all_day: Optional[bool] = Field(default=None, description="All-day item")


class ChecklistUpdateInput(BaseMCPInput):
    """Input for updating a checklist item."""

    task_id: str = Field(..., description="Task identifier", min_length=1)
    item_id: str = Field(..., description="Checklist item identifier", min_length=1)
    title: Optional[str] = Field(default=None, description="New title", min_length=1, max_length=500)
    status: Optional[Literal[0, 1]] = Field(default=None, description="0 = open, 1 = checked")


class ChecklistItemRefInput(BaseMCPInput):
    """Input addressing a checklist item."""

    task_id: str = Field(..., description="Task identifier", min_length=1)
    item_id: str = Field(..., description="Checklist item identifier", min_length=1)


# =============================================================================
# Tag & Filter Input Models
# =============================================================================


class TagCreateInput(BaseMCPInput):
    """Input for creating a tag."""

    name: str = Field(..., description="Tag name (e.g., 'work', 'urgent')", min_length=1, max_length=50)
    color: Optional[str] = Field(
        default=None,
        description="Hex color code (e.g., '#F18181')",
        pattern=r"^#[0-9A-Fa-f]{6}$",
    )
    parent: Optional[str] = Field(default=None, description="Parent tag name for nesting")


class TagUpdateInput(BaseMCPInput):
    """Input for updating a tag."""

    tag_name: str = Field(..., description="Tag name to update", min_length=1)
    color: Optional[str] = Field(
        default=None,
        description="New hex color code",
        pattern=r"^#[0-9A-Fa-f]{6}$",
    )
    parent: Optional[str] = Field(default=None, description="New parent tag name")
    sort_order: Optional[int] = Field(default=None, description="New sort order value")


class TagNameInput(BaseMCPInput):
    """Input addressing a tag by name."""

    tag_name: str = Field(..., description="Tag name", min_length=1)


class TagRenameInput(BaseMCPInput):
    """Input for renaming a tag."""

    name: str = Field(..., description="Current tag name", min_length=1)
    new_name: str = Field(..., description="New tag name", min_length=1, max_length=50)


class TagMergeInput(BaseMCPInput):
    """Input for merging one tag into another."""

    source: str = Field(..., description="Tag to merge (will be removed)", min_length=1)
    target: str = Field(..., description="Tag to merge into (will remain)", min_length=1)


class TaskTagsInput(BaseMCPInput):
    """Input for adding tags to a task."""

    task_id: str = Field(..., description="Task identifier", min_length=1)
    tags: List[str] = Field(..., description="Tag names to add", min_length=1, max_length=20)


class FilterCreateInput(BaseMCPInput):
    """Input for creating a saved filter."""

    name: str = Field(..., description="Filter name", min_length=1, max_length=100)
    rule: str = Field(..., description="Filter rule expression", min_length=1)


class FilterIdInput(BaseMCPInput):
    """Input addressing a saved filter."""

    filter_id: str = Field(..., description="Filter identifier", min_length=1)


# =============================================================================
# Habit Input Models
# =============================================================================


class HabitListInput(BaseMCPInput):
    """Input for listing habits."""

    include_archived: bool = Field(default=False, description="Include archived habits")


class HabitIdInput(BaseMCPInput):
    """Input addressing a habit."""

    habit_id: str = Field(..., description="Habit identifier", min_length=1)


class HabitCreateInput(BaseMCPInput):
    """Input for creating a habit."""

    name: str = Field(..., description="Habit name (e.g., 'Drink water')", min_length=1, max_length=100)
    type: Literal["Boolean", "Real"] = Field(
        default="Boolean",
        description="'Boolean' for done/not-done, 'Real' for quantitative goals",
    )
    goal: float = Field(default=1, description="Daily goal value", gt=0)
    step: Optional[float] = Field(default=None, description="Increment per check-in for 'Real' habits", gt=0)
    unit: Optional[str] = Field(default=None, description="Unit label (e.g., 'Count', 'ml')")
    repeat_rule: Optional[str] = Field(default=None, description="RRULE (e.g., 'RRULE:FREQ=DAILY;INTERVAL=1')")
    reminders: Optional[List[str]] = Field(default=None, description="Reminder times (e.g., ['09:00'])")
    color: Optional[str] = Field(default=None, description="Hex color code", pattern=r"^#[0-9A-Fa-f]{6}$")
    section_id: Optional[str] = Field(default=None, description="Habit section identifier")
    target_days: Optional[int] = Field(default=None, description="Target number of days", ge=0)
    encouragement: Optional[str] = Field(default=None, description="Motivational message")


class HabitUpdateInput(BaseMCPInput):
    """Input for updating a habit."""

    habit_id: str = Field(..., description="Habit identifier", min_length=1)
    name: Optional[str] = Field(default=None, description="New habit name", min_length=1, max_length=100)
    type: Optional[Literal["Boolean", "Real"]] = Field(default=None, description="New habit type")
    goal: Optional[float] = Field(default=None, description="New daily goal", gt=0)
    step: Optional[float] = Field(default=None, description="New increment", gt=0)
    unit: Optional[str] = Field(default=None, description="New unit label")
    repeat_rule: Optional[str] = Field(default=None, description="New RRULE")
    reminders: Optional[List[str]] = Field(default=None, description="New reminder times")
    color: Optional[str] = Field(default=None, description="New hex color", pattern=r"^#[0-9A-Fa-f]{6}$")
    section_id: Optional[str] = Field(default=None, description="New section identifier")
    target_days: Optional[int] = Field(default=None, description="New target number of days", ge=0)
    encouragement: Optional[str] = Field(default=None, description="New motivational message")


class HabitCheckinInput(BaseMCPInput):
    """Input for checking in a habit."""

    habit_id: str = Field(..., description="Habit identifier", min_length=1)
    checkin_stamp: str = Field(..., description="Day to check in, as YYYYMMDD (e.g., '20250115')", pattern=DATE_STAMP)
    value: float = Field(default=1, description="Value to record (1 for boolean habits)", ge=0)


class HabitCheckinsInput(BaseMCPInput):
    """Input for querying habit check-ins."""

    habit_ids: List[str] = Field(..., description="Habit identifiers", min_length=1, max_length=50)
    after_stamp: Optional[str] = Field(
        default=None,
        description="Only check-ins after this day, as YYYYMMDD",
        pattern=DATE_STAMP,
    )


# =============================================================================
# Focus Input Models
# =============================================================================


class FocusStartInput(BaseMCPInput):
    """Input for starting a focus session."""

    task_id: Optional[str] = Field(default=None, description="Task to focus on")
    duration: int = Field(default=25, description="Session length in minutes", ge=1, le=180)
    mode: Literal["pomo", "stopwatch"] = Field(default="pomo", description="'pomo' countdown or 'stopwatch'")
    note: Optional[str] = Field(default=None, description="Session note", max_length=1000)


class FocusHistoryInput(BaseMCPInput):
    """Input for listing focus sessions."""

    from_date: Optional[str] = Field(default=None, description="Start date (e.g., '2025-01-01')")
    to_date: Optional[str] = Field(default=None, description="End date (e.g., '2025-01-31')")
    limit: int = Field(default=20, description="Maximum number of sessions", ge=1, le=200)


class FocusRecordIdInput(BaseMCPInput):
    """Input addressing a focus record."""

    record_id: str = Field(..., description="Focus record identifier", min_length=1)


# =============================================================================
# Calendar Input Models
# =============================================================================


class CalendarEventsInput(BaseMCPInput):
    """Input for listing calendar events."""

    start_date: str = Field(..., description="Range start (e.g., '2025-01-01')", min_length=1)
    end_date: str = Field(..., description="Range end (e.g., '2025-01-31')", min_length=1)
    calendar_id: Optional[str] = Field(default=None, description="Restrict to one calendar")


class EventIdInput(BaseMCPInput):
    """Input addressing a calendar event."""

    event_id: str = Field(..., description="Event identifier", min_length=1)


class EventCreateInput(BaseMCPInput):
    """Input for creating a calendar event."""

    title: str = Field(..., description="Event title", min_length=1, max_length=500)
    start_date: str = Field(..., description="Start in ISO format", min_length=1)
    end_date: str = Field(..., description="End in ISO format", min_length=1)
    calendar_id: Optional[str] = Field(default=None, description="Calendar to create the event in")
    is_all_day: Optional[bool] = Field(default=None, description="All-day event")
    location: Optional[str] = Field(default=None, description="Event location", max_length=500)
    description: Optional[str] = Field(default=None, description="Event description", max_length=10000)
    time_zone: Optional[str] = Field(default=None, description="IANA timezone")


class EventUpdateInput(BaseMCPInput):
    """Input for updating a calendar event."""

    event_id: str = Field(..., description="Event identifier", min_length=1)
    title: Optional[str] = Field(default=None, description="New title", min_length=1, max_length=500)
    start_date: Optional[str] = Field(default=None, description="New start in ISO format")
    end_date: Optional[str] = Field(default=None, description="New end in ISO format")
    calendar_id: Optional[str] = Field(default=None, description="Move to another calendar")
    is_all_day: Optional[bool] = Field(default=None, description="All-day event")
    location: Optional[str] = Field(default=None, description="New location", max_length=500)
    description: Optional[str] = Field(default=None, description="New description", max_length=10000)
    time_zone: Optional[str] = Field(default=None, description="New IANA timezone")


class CalendarSubscribeInput(BaseMCPInput):
    """Input for subscribing to an external calendar."""

    url: str = Field(..., description="iCal feed URL", pattern=r"^(https?|webcal)://")
    name: Optional[str] = Field(default=None, description="Display name", max_length=100)
    color: Optional[str] = Field(default=None, description="Hex color code", pattern=r"^#[0-9A-Fa-f]{6}$")


class SubscriptionIdInput(BaseMCPInput):
    """Input addressing a calendar subscription."""

    subscription_id: str = Field(..., description="Subscription identifier", min_length=1)


class CalendarAccountInput(BaseMCPInput):
    """Input addressing a calendar account."""

    account_id: str = Field(..., description="Calendar account identifier", min_length=1)


# =============================================================================
# Collaboration & Team Input Models
# =============================================================================

Permission = Literal["read", "comment", "write"]


class ProjectShareInput(BaseMCPInput):
    """Input for sharing a project."""

    project_id: str = Field(..., description="Project identifier", min_length=1)
    emails: List[str] = Field(..., description="Email addresses to invite", min_length=1, max_length=20)
    permission: Permission = Field(default="write", description="Permission: 'read', 'comment' or 'write'")


class MemberPermissionInput(BaseMCPInput):
    """Input for changing a project member's permission."""

    project_id: str = Field(..., description="Project identifier", min_length=1)
    user_id: str = Field(..., description="Member user identifier", min_length=1)
    permission: Permission = Field(..., description="Permission: 'read', 'comment' or 'write'")


class ProjectMemberInput(BaseMCPInput):
    """Input addressing a project member."""

    project_id: str = Field(..., description="Project identifier", min_length=1)
    user_id: str = Field(..., description="Member user identifier", min_length=1)


class TaskAssignInput(BaseMCPInput):
    """Input for assigning a task."""

    project_id: str = Field(..., description="Project ID the task belongs to", min_length=1)
    task_id: str = Field(..., description="Task identifier", min_length=1)
    assignee: str = Field(..., description="User identifier of the assignee", min_length=1)


class CommentCreateInput(BaseMCPInput):
    """Input for commenting on a task."""

    project_id: str = Field(..., description="Project ID the task belongs to", min_length=1)
    task_id: str = Field(..., description="Task identifier", min_length=1)
    text: str = Field(..., description="Comment text", min_length=1, max_length=5000)


class CommentRefInput(BaseMCPInput):
    """Input addressing a task comment."""

    project_id: str = Field(..., description="Project ID the task belongs to", min_length=1)
    task_id: str = Field(..., description="Task identifier", min_length=1)
    comment_id: str = Field(..., description="Comment identifier", min_length=1)


class TeamIdInput(BaseMCPInput):
    """Input addressing a team."""

    team_id: str = Field(..., description="Team identifier", min_length=1)


class TeamCreateInput(BaseMCPInput):
    """Input for creating a team."""

    name: str = Field(..., description="Team name", min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, description="Team description", max_length=1000)


class TeamUpdateInput(BaseMCPInput):
    """Input for updating a team."""

    team_id: str = Field(..., description="Team identifier", min_length=1)
    name: Optional[str] = Field(default=None, description="New team name", min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, description="New description", max_length=1000)


class TeamInviteInput(BaseMCPInput):
    """Input for inviting someone to a team."""

    team_id: str = Field(..., description="Team identifier", min_length=1)
    email: str = Field(..., description="Email address to invite", pattern=EMAIL)
    role: Literal["member", "admin"] = Field(default="member", description="Role: 'member' or 'admin'")


class TeamMemberInput(BaseMCPInput):
    """Input addressing a team member."""

    team_id: str = Field(..., description="Team identifier", min_length=1)
    user_id: str = Field(..., description="Member user identifier", min_length=1)


# =============================================================================
# Template Input Models
# =============================================================================


class TemplateListInput(BaseMCPInput):
    """Input for listing templates."""

    kind: Optional[Literal["task", "project"]] = Field(default=None, description="Filter by template kind")


class TemplateIdInput(BaseMCPInput):
    """Input addressing a template."""

    template_id: str = Field(..., description="Template identifier", min_length=1)


class TemplateCreateInput(BaseMCPInput):
    """Input for creating a template."""

    name: str = Field(..., description="Template name", min_length=1, max_length=100)
    kind: Literal["task", "project"] = Field(default="task", description="Template kind")
    title: Optional[str] = Field(default=None, description="Default task title", max_length=500)
    content: Optional[str] = Field(default=None, description="Default content", max_length=10000)
    items: Optional[List[str]] = Field(default=None, description="Checklist item titles", max_length=100)


class ProjectTemplateInput(BaseMCPInput):
    """Input for saving a project as a template."""

    project_id: str = Field(..., description="Project identifier", min_length=1)
    name: str = Field(..., description="Template name", min_length=1, max_length=100)


class TemplateApplyInput(BaseMCPInput):
    """Input for applying a template."""

    template_id: str = Field(..., description="Template identifier", min_length=1)
    project_id: Optional[str] = Field(default=None, description="Project to add the tasks to")
    name: Optional[str] = Field(default=None, description="Name for a project created from the template")


# =============================================================================
# Account Input Models
# =============================================================================


class PreferencesUpdateInput(BaseMCPInput):
    """Input for updating user preferences."""

    time_zone: Optional[str] = Field(default=None, description="IANA timezone")
    start_day_of_week: Optional[int] = Field(default=None, description="0 = Sunday ... 6 = Saturday", ge=0, le=6)
    date_format: Optional[str] = Field(default=None, description="Date format (e.g., 'yyyy-MM-dd')")
    time_format: Optional[Literal["12h", "24h"]] = Field(default=None, description="'12h' or '24h'")
    default_priority: Optional[Priority] = Field(default=None, description="Default priority for new tasks")
    default_project_id: Optional[str] = Field(default=None, description="Default project for new tasks")


# =============================================================================
# Trash Input Models
# =============================================================================


class TrashListInput(BaseMCPInput):
    """Input for listing deleted tasks."""

    limit: int = Field(default=50, description="Maximum number of tasks", ge=1, le=500)


class TrashRestoreInput(BaseMCPInput):
    """Input for restoring a deleted task."""

    task_id: str = Field(..., description="Task identifier", min_length=1)
    project_id: Optional[str] = Field(default=None, description="Project to restore into")
