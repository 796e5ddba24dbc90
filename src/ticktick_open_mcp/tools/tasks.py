"""Task, checklist and trash tools."""

from __future__ import annotations

from typing import Any

from ticktick_open_mcp.tools.formatting import confirmation, detail, listing
from ticktick_open_mcp.tools.inputs import (
    LOCAL_FIELDS,
    BatchTaskCreateInput,
    BatchTaskDeleteInput,
    BatchTaskUpdateInput,
    ChecklistAddInput,
    ChecklistItemRefInput,
    ChecklistUpdateInput,
    CompletedTasksInput,
    NoArgsInput,
    ProjectTaskInput,
    TaskChanges,
    TaskCreateInput,
    TaskDuplicateInput,
    TaskIdInput,
    TaskListInput,
    TaskMoveInput,
    TaskParentInput,
    TaskSearchInput,
    TaskUpdateInput,
    TrashListInput,
    TrashRestoreInput,
    UpcomingTasksInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec, camelize


def task_changes_body(changes: TaskChanges) -> dict[str, Any]:
    """Body of a task update: the API expects the task ID as ``id``."""
    fields = changes.model_dump(mode="json", exclude_none=True, exclude={"task_id"} | LOCAL_FIELDS)
    return {"id": changes.task_id, **camelize(fields)}


def batch_create_body(params: BatchTaskCreateInput) -> dict[str, Any]:
    return {"add": [camelize(task.model_dump(mode="json", exclude_none=True)) for task in params.tasks]}


def batch_update_body(params: BatchTaskUpdateInput) -> dict[str, Any]:
    return {"update": [task_changes_body(task) for task in params.tasks]}


def batch_delete_body(params: BatchTaskDeleteInput) -> dict[str, Any]:
    return {"delete": [camelize(task.model_dump(mode="json")) for task in params.tasks]}


TOOLS = [
    # =========================================================================
    # Tasks
    # =========================================================================
    ToolSpec(
        name="ticktick_get_tasks",
        title="List Tasks",
        description="List tasks, optionally filtered by project and status (0 active, 2 completed).",
        input_model=TaskListInput,
        method="GET",
        path="/task",
        query=("project_id", "status"),
        formatter=listing("task", "Tasks"),
    ),
    ToolSpec(
        name="ticktick_get_task",
        title="Get Task",
        description="Get a task by ID, including status, priority, dates, tags and checklist size.",
        input_model=TaskIdInput,
        method="GET",
        path="/task/{task_id}",
        formatter=detail("task", "Task"),
    ),
    ToolSpec(
        name="ticktick_create_task",
        title="Create Task",
        description=(
            "Create a new task. Only the title is required; without project_id the task "
            "goes to the inbox. Priority: 0 none, 1 low, 3 medium, 5 high."
        ),
        input_model=TaskCreateInput,
        method="POST",
        path="/task",
        formatter=detail("task", "Task Created"),
    ),
    ToolSpec(
        name="ticktick_update_task",
        title="Update Task",
        description="Update the provided fields of a task; omitted fields are left unchanged.",
        input_model=TaskUpdateInput,
        method="POST",
        path="/task/{task_id}",
        body=task_changes_body,
        formatter=detail("task", "Task Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_task",
        title="Delete Task",
        description="Delete a task from a project (it moves to the trash).",
        input_model=ProjectTaskInput,
        method="DELETE",
        path="/project/{project_id}/task/{task_id}",
        formatter=confirmation("🗑️ Task `{task_id}` deleted from project `{project_id}`."),
    ),
    ToolSpec(
        name="ticktick_complete_task",
        title="Complete Task",
        description="Mark a task as completed.",
        input_model=ProjectTaskInput,
        method="POST",
        path="/project/{project_id}/task/{task_id}/complete",
        formatter=confirmation("✅ Task `{task_id}` marked as complete."),
    ),
    ToolSpec(
        name="ticktick_uncomplete_task",
        title="Reopen Task",
        description="Mark a completed task as active again.",
        input_model=ProjectTaskInput,
        method="POST",
        path="/project/{project_id}/task/{task_id}/uncomplete",
        formatter=confirmation("↩️ Task `{task_id}` reopened."),
    ),
    ToolSpec(
        name="ticktick_move_task",
        title="Move Task",
        description="Move a task from one project to another.",
        input_model=TaskMoveInput,
        method="POST",
        path="/task/{task_id}/move",
        formatter=confirmation("➡️ Task `{task_id}` moved from `{from_project_id}` to `{to_project_id}`."),
    ),
    ToolSpec(
        name="ticktick_search_tasks",
        title="Search Tasks",
        description="Search tasks by keyword in title and content, optionally within one project.",
        input_model=TaskSearchInput,
        method="GET",
        path="/task/search",
        query=("keyword", "project_id"),
        formatter=listing("task", "Search Results"),
    ),
    ToolSpec(
        name="ticktick_get_today_tasks",
        title="Today's Tasks",
        description="List tasks due today.",
        input_model=NoArgsInput,
        method="GET",
        path="/task/today",
        formatter=listing("task", "Due Today"),
    ),
    ToolSpec(
        name="ticktick_get_overdue_tasks",
        title="Overdue Tasks",
        description="List active tasks whose due date has passed.",
        input_model=NoArgsInput,
        method="GET",
        path="/task/overdue",
        formatter=listing("task", "Overdue"),
    ),
    ToolSpec(
        name="ticktick_get_upcoming_tasks",
        title="Upcoming Tasks",
        description="List tasks due in the next N days (default 7).",
        input_model=UpcomingTasksInput,
        method="GET",
        path="/task/upcoming",
        query=("days",),
        formatter=listing("task", "Upcoming"),
    ),
    ToolSpec(
        name="ticktick_get_completed_tasks",
        title="Completed Tasks",
        description="List completed tasks, optionally within a date range.",
        input_model=CompletedTasksInput,
        method="GET",
        path="/task/completed",
        query=("from_date", "to_date", "limit"),
        formatter=listing("task", "Completed Tasks"),
    ),
    ToolSpec(
        name="ticktick_batch_create_tasks",
        title="Batch Create Tasks",
        description="Create up to 50 tasks in a single request.",
        input_model=BatchTaskCreateInput,
        method="POST",
        path="/batch/task",
        body=batch_create_body,
        formatter=confirmation("✅ Batch create submitted for {tasks_count} task(s)."),
    ),
    ToolSpec(
        name="ticktick_batch_update_tasks",
        title="Batch Update Tasks",
        description="Update up to 50 tasks in a single request.",
        input_model=BatchTaskUpdateInput,
        method="POST",
        path="/batch/task",
        body=batch_update_body,
        formatter=confirmation("✏️ Batch update submitted for {tasks_count} task(s)."),
    ),
    ToolSpec(
        name="ticktick_batch_delete_tasks",
        title="Batch Delete Tasks",
        description="Delete up to 50 tasks in a single request.",
        input_model=BatchTaskDeleteInput,
        method="POST",
        path="/batch/task",
        body=batch_delete_body,
        formatter=confirmation("🗑️ Batch delete submitted for {tasks_count} task(s)."),
    ),
    ToolSpec(
        name="ticktick_duplicate_task",
        title="Duplicate Task",
        description="Copy a task, optionally into another project.",
        input_model=TaskDuplicateInput,
        method="POST",
        path="/task/{task_id}/duplicate",
        formatter=detail("task", "Task Duplicated"),
    ),
    ToolSpec(
        name="ticktick_get_task_activity",
        title="Task Activity",
        description="Show the change history of a task.",
        input_model=TaskIdInput,
        method="GET",
        path="/task/{task_id}/activity",
        formatter=listing("activity", "Task Activity"),
    ),
    # =========================================================================
    # Subtasks & Checklists
    # =========================================================================
    ToolSpec(
        name="ticktick_get_subtasks",
        title="List Subtasks",
        description="List the subtasks of a task.",
        input_model=TaskIdInput,
        method="GET",
        path="/task/{task_id}/subtasks",
        formatter=listing("task", "Subtasks"),
    ),
    ToolSpec(
        name="ticktick_set_task_parent",
        title="Make Subtask",
        description="Make a task a subtask of another task in the same project.",
        input_model=TaskParentInput,
        method="POST",
        path="/task/{task_id}/parent",
        formatter=confirmation("🔗 Task `{task_id}` is now a subtask of `{parent_id}`."),
    ),
    ToolSpec(
        name="ticktick_add_checklist_item",
        title="Add Checklist Item",
        description="Add a checklist item to a task.",
        input_model=ChecklistAddInput,
        method="POST",
        path="/task/{task_id}/checklist",
        formatter=detail("checklist_item", "Checklist Item Added"),
    ),
    ToolSpec(
        name="ticktick_update_checklist_item",
        title="Update Checklist Item",
        description="Rename a checklist item or check/uncheck it (status 1 = checked).",
        input_model=ChecklistUpdateInput,
        method="POST",
        path="/task/{task_id}/checklist/{item_id}",
        formatter=detail("checklist_item", "Checklist Item Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_checklist_item",
        title="Delete Checklist Item",
        description="Remove a checklist item from a task.",
        input_model=ChecklistItemRefInput,
        method="DELETE",
        path="/task/{task_id}/checklist/{item_id}",
        formatter=confirmation("🗑️ Checklist item `{item_id}` removed from task `{task_id}`."),
    ),
    # =========================================================================
    # Trash
    # =========================================================================
    ToolSpec(
        name="ticktick_get_trash",
        title="List Trash",
        description="List deleted tasks in the trash.",
        input_model=TrashListInput,
        method="GET",
        path="/trash",
        query=("limit",),
        formatter=listing("task", "Trash"),
    ),
    ToolSpec(
        name="ticktick_restore_task",
        title="Restore Task",
        description="Restore a deleted task from the trash, optionally into another project.",
        input_model=TrashRestoreInput,
        method="POST",
        path="/trash/{task_id}/restore",
        formatter=confirmation("♻️ Task `{task_id}` restored."),
    ),
    ToolSpec(
        name="ticktick_empty_trash",
        title="Empty Trash",
        description="Permanently delete every task in the trash.",
        input_model=NoArgsInput,
        method="DELETE",
        path="/trash",
        formatter=confirmation("🗑️ Trash emptied."),
    ),
]
