"""Tag and saved-filter tools."""

from __future__ import annotations

from typing import Any

from ticktick_open_mcp.tools.formatting import confirmation, detail, listing
from ticktick_open_mcp.tools.inputs import (
    FilterCreateInput,
    FilterIdInput,
    NoArgsInput,
    TagCreateInput,
    TagMergeInput,
    TagNameInput,
    TagRenameInput,
    TagUpdateInput,
    TaskTagsInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec


def merge_body(params: TagMergeInput) -> dict[str, Any]:
    return {"name": params.source, "newName": params.target}


TOOLS = [
    # =========================================================================
    # Tags
    # =========================================================================
    ToolSpec(
        name="ticktick_get_tags",
        title="List Tags",
        description="List all tags with their colors and parent tags.",
        input_model=NoArgsInput,
        method="GET",
        path="/tag",
        formatter=listing("tag", "Tags"),
    ),
    ToolSpec(
        name="ticktick_create_tag",
        title="Create Tag",
        description="Create a tag, optionally with a color and a parent tag for nesting.",
        input_model=TagCreateInput,
        method="POST",
        path="/tag",
        formatter=detail("tag", "Tag Created"),
    ),
    ToolSpec(
        name="ticktick_update_tag",
        title="Update Tag",
        description=(
            "Change a tag's color, parent or sort order. Tags literally named 'rename' or "
            "'merge' cannot be updated with this tool, since those paths are reserved."
        ),
        input_model=TagUpdateInput,
        method="PUT",
        path="/tag/{tag_name}",
        formatter=detail("tag", "Tag Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_tag",
        title="Delete Tag",
        description="Delete a tag. Tasks keep existing but lose the tag.",
        input_model=TagNameInput,
        method="DELETE",
        path="/tag/{tag_name}",
        formatter=confirmation("🗑️ Tag `{tag_name}` deleted."),
    ),
    ToolSpec(
        name="ticktick_rename_tag",
        title="Rename Tag",
        description="Rename a tag across all tasks.",
        input_model=TagRenameInput,
        method="PUT",
        path="/tag/rename",
        formatter=confirmation("🏷️ Tag `{name}` renamed to `{new_name}`."),
    ),
    ToolSpec(
        name="ticktick_merge_tags",
        title="Merge Tags",
        description="Merge the source tag into the target tag; the source tag is removed.",
        input_model=TagMergeInput,
        method="PUT",
        path="/tag/merge",
        body=merge_body,
        formatter=confirmation("🔀 Tag `{source}` merged into `{target}`."),
    ),
    ToolSpec(
        name="ticktick_add_tags_to_task",
        title="Tag Task",
        description="Add one or more tags to a task.",
        input_model=TaskTagsInput,
        method="POST",
        path="/task/{task_id}/tags",
        formatter=detail("task", "Task Tagged"),
    ),
    # =========================================================================
    # Saved Filters
    # =========================================================================
    ToolSpec(
        name="ticktick_get_filters",
        title="List Filters",
        description="List saved filters (smart lists).",
        input_model=NoArgsInput,
        method="GET",
        path="/filter",
        formatter=listing("filter", "Filters"),
    ),
    ToolSpec(
        name="ticktick_create_filter",
        title="Create Filter",
        description="Create a saved filter from a rule expression.",
        input_model=FilterCreateInput,
        method="POST",
        path="/filter",
        formatter=detail("filter", "Filter Created"),
    ),
    ToolSpec(
        name="ticktick_delete_filter",
        title="Delete Filter",
        description="Delete a saved filter.",
        input_model=FilterIdInput,
        method="DELETE",
        path="/filter/{filter_id}",
        formatter=confirmation("🗑️ Filter `{filter_id}` deleted."),
    ),
    ToolSpec(
        name="ticktick_get_filter_tasks",
        title="Filter Tasks",
        description="List the tasks matched by a saved filter.",
        input_model=FilterIdInput,
        method="GET",
        path="/filter/{filter_id}/task",
        formatter=listing("task", "Filtered Tasks"),
    ),
]
