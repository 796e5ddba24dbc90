"""Task and project template tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import confirmation, detail, listing
from ticktick_open_mcp.tools.inputs import (
    ProjectTemplateInput,
    TemplateApplyInput,
    TemplateCreateInput,
    TemplateIdInput,
    TemplateListInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    ToolSpec(
        name="ticktick_get_templates",
        title="List Templates",
        description="List task and project templates, optionally filtered by kind.",
        input_model=TemplateListInput,
        method="GET",
        path="/template",
        query=("kind",),
        formatter=listing("template", "Templates"),
    ),
    ToolSpec(
        name="ticktick_get_template",
        title="Get Template",
        description="Get a template by ID.",
        input_model=TemplateIdInput,
        method="GET",
        path="/template/{template_id}",
        formatter=detail("template", "Template"),
    ),
    ToolSpec(
        name="ticktick_create_template",
        title="Create Template",
        description="Create a task or project template with optional default content and checklist items.",
        input_model=TemplateCreateInput,
        method="POST",
        path="/template",
        formatter=detail("template", "Template Created"),
    ),
    ToolSpec(
        name="ticktick_create_template_from_project",
        title="Save Project as Template",
        description="Save an existing project and its tasks as a reusable template.",
        input_model=ProjectTemplateInput,
        method="POST",
        path="/project/{project_id}/template",
        formatter=detail("template", "Template Created"),
    ),
    ToolSpec(
        name="ticktick_delete_template",
        title="Delete Template",
        description="Delete a template.",
        input_model=TemplateIdInput,
        method="DELETE",
        path="/template/{template_id}",
        formatter=confirmation("🗑️ Template `{template_id}` deleted."),
    ),
    ToolSpec(
        name="ticktick_apply_template",
        title="Apply Template",
        description="Create tasks (or a new project) from a template.",
        input_model=TemplateApplyInput,
        method="POST",
        path="/template/{template_id}/apply",
        formatter=confirmation("📋 Template `{template_id}` applied."),
    ),
]
