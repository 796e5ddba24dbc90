"""Project, folder and kanban column tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import (
    confirmation,
    detail,
    format_project_data,
    listing,
)
from ticktick_open_mcp.tools.inputs import (
    ColumnCreateInput,
    ColumnRefInput,
    FolderCreateInput,
    FolderIdInput,
    NoArgsInput,
    ProjectCreateInput,
    ProjectIdInput,
    ProjectUpdateInput,
    TaskColumnMoveInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    # =========================================================================
    # Projects
    # =========================================================================
    ToolSpec(
        name="ticktick_get_projects",
        title="List Projects",
        description="List all projects (lists) in the TickTick account with their IDs, kind and view mode.",
        input_model=NoArgsInput,
        method="GET",
        path="/project",
        formatter=listing("project", "Projects"),
    ),
    ToolSpec(
        name="ticktick_get_project",
        title="Get Project",
        description="Get a single project by ID.",
        input_model=ProjectIdInput,
        method="GET",
        path="/project/{project_id}",
        formatter=detail("project", "Project"),
    ),
    ToolSpec(
        name="ticktick_get_project_data",
        title="Get Project Data",
        description="Get a project together with its undone tasks and kanban columns.",
        input_model=ProjectIdInput,
        method="GET",
        path="/project/{project_id}/data",
        formatter=format_project_data,
    ),
    ToolSpec(
        name="ticktick_create_project",
        title="Create Project",
        description=(
            "Create a new project. Optionally set color, view mode "
            "('list', 'kanban', 'timeline'), kind ('TASK', 'NOTE') and folder."
        ),
        input_model=ProjectCreateInput,
        method="POST",
        path="/project",
        formatter=detail("project", "Project Created"),
    ),
    ToolSpec(
        name="ticktick_update_project",
        title="Update Project",
        description="Update a project's name, color, view mode, kind, folder or sort order.",
        input_model=ProjectUpdateInput,
        method="POST",
        path="/project/{project_id}",
        formatter=detail("project", "Project Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_project",
        title="Delete Project",
        description="Permanently delete a project and all of its tasks.",
        input_model=ProjectIdInput,
        method="DELETE",
        path="/project/{project_id}",
        formatter=confirmation("🗑️ Project `{project_id}` deleted."),
    ),
    ToolSpec(
        name="ticktick_archive_project",
        title="Archive Project",
        description="Archive (close) a project. Archived projects are hidden from the list view.",
        input_model=ProjectIdInput,
        method="POST",
        path="/project/{project_id}/archive",
        formatter=confirmation("📦 Project `{project_id}` archived."),
    ),
    ToolSpec(
        name="ticktick_unarchive_project",
        title="Unarchive Project",
        description="Restore an archived project.",
        input_model=ProjectIdInput,
        method="POST",
        path="/project/{project_id}/unarchive",
        formatter=confirmation("📂 Project `{project_id}` restored from archive."),
    ),
    # =========================================================================
    # Folders
    # =========================================================================
    ToolSpec(
        name="ticktick_get_project_folders",
        title="List Folders",
        description="List project folders (project groups).",
        input_model=NoArgsInput,
        method="GET",
        path="/project/folder",
        formatter=listing("folder", "Folders"),
    ),
    ToolSpec(
        name="ticktick_create_project_folder",
        title="Create Folder",
        description="Create a folder to group projects.",
        input_model=FolderCreateInput,
        method="POST",
        path="/project/folder",
        formatter=detail("folder", "Folder Created"),
    ),
    ToolSpec(
        name="ticktick_delete_project_folder",
        title="Delete Folder",
        description="Delete a folder. Projects inside it are kept and become ungrouped.",
        input_model=FolderIdInput,
        method="DELETE",
        path="/project/folder/{folder_id}",
        formatter=confirmation("🗑️ Folder `{folder_id}` deleted."),
    ),
    # =========================================================================
    # Kanban Columns
    # =========================================================================
    ToolSpec(
        name="ticktick_get_project_columns",
        title="List Columns",
        description="List the kanban columns (sections) of a project.",
        input_model=ProjectIdInput,
        method="GET",
        path="/project/{project_id}/column",
        formatter=listing("column", "Columns"),
    ),
    ToolSpec(
        name="ticktick_create_column",
        title="Create Column",
        description="Add a kanban column to a project.",
        input_model=ColumnCreateInput,
        method="POST",
        path="/project/{project_id}/column",
        formatter=detail("column", "Column Created"),
    ),
    ToolSpec(
        name="ticktick_delete_column",
        title="Delete Column",
        description="Delete a kanban column from a project.",
        input_model=ColumnRefInput,
        method="DELETE",
        path="/project/{project_id}/column/{column_id}",
        formatter=confirmation("🗑️ Column `{column_id}` deleted from project `{project_id}`."),
    ),
    ToolSpec(
        name="ticktick_move_task_to_column",
        title="Move Task to Column",
        description="Move a task into another kanban column of its project.",
        input_model=TaskColumnMoveInput,
        method="POST",
        path="/project/{project_id}/task/{task_id}/column",
        formatter=confirmation("➡️ Task `{task_id}` moved to column `{column_id}`."),
    ),
]
