"""
Tool Registry Tests.

This module tests the tool catalogue itself:
- Catalogue size, naming and uniqueness
- Advertised JSON Schemas and annotations
- ToolSpec request templates (path fields, query fields, bodies)
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.factories import ALL_TOOLS, READ_AND_DELETE_TOOLS, REGISTRY, ArgumentFactory
from ticktick_open_mcp.tools import TOOL_GROUPS, ToolRegistry, ToolSpec, build_registry
from ticktick_open_mcp.tools.formatting import detail
from ticktick_open_mcp.tools.inputs import NoArgsInput, ResponseFormat, TaskIdInput
from ticktick_open_mcp.tools.registry import camelize

pytestmark = [pytest.mark.registry, pytest.mark.unit]

GROUP_SIZES = {
    "projects": 15,
    "tasks": 26,
    "tags": 11,
    "habits": 11,
    "focus": 10,
    "calendar": 9,
    "collaboration": 16,
    "templates": 6,
    "account": 8,
}


# =============================================================================
# Catalogue Tests
# =============================================================================


class TestCatalogue:
    """Tests for the shape of the full tool catalogue."""

    def test_catalogue_has_112_tools(self, registry: ToolRegistry):
        """Test that every tool is registered exactly once."""
        assert len(registry) == 112
        assert len(set(registry.names)) == 112

    def test_group_sizes(self):
        """Test the number of tools contributed by each group."""
        assert [len(group) for group in TOOL_GROUPS] == list(GROUP_SIZES.values())

    def test_names_are_prefixed_snake_case(self, registry: ToolRegistry):
        """Test that tool names follow the ticktick_<verb>_<noun> convention."""
        for name in registry.names:
            assert name.startswith("ticktick_")
            assert name == name.lower()
            assert " " not in name

    def test_registry_lookup(self, registry: ToolRegistry):
        """Test lookup by name."""
        assert "ticktick_get_task" in registry
        assert registry.get("ticktick_get_task").path == "/task/{task_id}"
        assert registry.get("ticktick_nonexistent") is None
        assert "ticktick_nonexistent" not in registry

    def test_registry_preserves_catalogue_order(self, registry: ToolRegistry):
        """Test that tools are listed in catalogue order."""
        assert registry.names[0] == "ticktick_get_projects"
        assert registry.names[-1] == "ticktick_get_user_ranking"

    def test_duplicate_names_rejected(self):
        """Test that registering the same name twice fails."""
        spec = REGISTRY.get("ticktick_get_task")
        with pytest.raises(ValueError, match="Duplicate tool name"):
            ToolRegistry([spec, spec])

    def test_build_registry_is_fresh(self):
        """Test that each build returns an independent registry."""
        assert build_registry() is not build_registry()

    @pytest.mark.parametrize(
        "name",
        [
            "ticktick_get_projects",
            "ticktick_create_task",
            "ticktick_batch_delete_tasks",
            "ticktick_merge_tags",
            "ticktick_checkin_habit",
            "ticktick_get_focus_heatmap",
            "ticktick_subscribe_calendar",
            "ticktick_invite_team_member",
            "ticktick_apply_template",
            "ticktick_get_user_ranking",
            "ticktick_empty_trash",
        ],
    )
    def test_known_tools_present(self, registry: ToolRegistry, name: str):
        """Test a sample of tools from every group."""
        assert name in registry


# =============================================================================
# Schema Tests
# =============================================================================


class TestSchemas:
    """Tests for the schemas advertised by tools/list."""

    @pytest.mark.parametrize("name", ALL_TOOLS)
    def test_schema_is_object(self, name: str):
        """Test that every input schema is a JSON object schema."""
        schema = REGISTRY.get(name).input_schema
        assert schema["type"] == "object"
        assert "properties" in schema

    @pytest.mark.parametrize("name", ALL_TOOLS)
    def test_path_fields_are_required(self, name: str):
        """Test that identifiers substituted into the path are required."""
        spec = REGISTRY.get(name)
        required = set(spec.input_schema.get("required", []))
        assert set(spec.path_fields) <= required

    @pytest.mark.parametrize("name", ALL_TOOLS)
    def test_schema_rejects_unknown_properties(self, name: str):
        """Test that schemas forbid additional properties."""
        assert REGISTRY.get(name).input_schema.get("additionalProperties") is False

    @pytest.mark.parametrize("name", ALL_TOOLS)
    def test_mcp_tool_conversion(self, name: str):
        """Test conversion to mcp.types.Tool."""
        spec = REGISTRY.get(name)
        tool = spec.to_mcp_tool()

        assert tool.name == name
        assert tool.description
        assert tool.inputSchema == spec.input_schema
        assert tool.annotations.readOnlyHint is (spec.method == "GET")
        assert tool.annotations.destructiveHint is (spec.method == "DELETE")

    def test_priority_schema_lists_allowed_values(self):
        """Test that task priority is advertised as 0, 1, 3 or 5."""
        schema = REGISTRY.get("ticktick_create_task").input_schema
        assert schema["properties"]["priority"]["enum"] == [0, 1, 3, 5]
        assert schema["required"] == ["title"]


# =============================================================================
# ToolSpec Tests
# =============================================================================


class TestToolSpec:
    """Tests for ToolSpec request templates."""

    def test_path_field_must_be_required(self):
        """Test that a path placeholder without a required field is rejected."""
        with pytest.raises(ValidationError, match="path field 'task_id'"):
            ToolSpec(
                name="broken",
                title="Broken",
                description="Broken tool",
                input_model=NoArgsInput,
                method="GET",
                path="/task/{task_id}",
                formatter=detail("task", "Task"),
            )

    def test_query_field_must_exist(self):
        """Test that an unknown query field is rejected."""
        with pytest.raises(ValidationError, match="query field 'keyword'"):
            ToolSpec(
                name="broken",
                title="Broken",
                description="Broken tool",
                input_model=TaskIdInput,
                method="GET",
                path="/task/{task_id}",
                query=("keyword",),
                formatter=detail("task", "Task"),
            )

    def test_path_fields_parsed_in_order(self):
        """Test placeholder extraction from a path template."""
        spec = REGISTRY.get("ticktick_delete_task_comment")
        assert spec.path_fields == ("project_id", "task_id", "comment_id")

    @pytest.mark.parametrize("name", ALL_TOOLS)
    def test_request_never_carries_local_fields(self, name: str):
        """Test that response_format stays on the server."""
        spec = REGISTRY.get(name)
        params = spec.validate_arguments({**ArgumentFactory.for_tool(spec), "response_format": "json"})
        request = spec.build_request(params)

        assert "responseFormat" not in request.params
        if isinstance(request.body, dict):
            assert "responseFormat" not in request.body
            assert "response_format" not in request.body

    @pytest.mark.parametrize("name", READ_AND_DELETE_TOOLS)
    def test_get_and_delete_send_no_body(self, name: str):
        """Test that read and delete tools never send a body."""
        spec = REGISTRY.get(name)
        request = spec.build_request(spec.validate_arguments(ArgumentFactory.for_tool(spec)))
        assert request.body is None

    @pytest.mark.parametrize("value", [".", ".."])
    def test_dot_segment_rejected(self, value: str):
        """Test that a path value cannot be a URL dot segment."""
        spec = REGISTRY.get("ticktick_remove_team_member")

        with pytest.raises(ValidationError) as exc_info:
            spec.validate_arguments({"team_id": "TM", "user_id": value})

        [error] = exc_info.value.errors()
        assert error["loc"] == ("user_id",)
        assert error["type"] == "path_segment"

    def test_dots_inside_path_value_allowed(self):
        """Test that only whole dot segments are rejected."""
        spec = REGISTRY.get("ticktick_delete_tag")
        request = spec.build_request(spec.validate_arguments({"tag_name": "v1..2"}))
        assert request.path == "/tag/v1..2"

    def test_arguments_validated_strictly(self):
        """Test that strings are not coerced into integers or booleans."""
        with pytest.raises(ValidationError):
            REGISTRY.get("ticktick_get_upcoming_tasks").validate_arguments({"days": "7"})
        with pytest.raises(ValidationError):
            REGISTRY.get("ticktick_get_habits").validate_arguments({"include_archived": "yes"})

    def test_response_format_accepts_enum_value(self):
        """Test that enum members are still given by their string value."""
        params = REGISTRY.get("ticktick_get_projects").validate_arguments({"response_format": "json"})
        assert params.response_format is ResponseFormat.JSON

    def test_update_tag_documents_reserved_names(self):
        """Test that update_tag warns about tags shadowed by fixed routes."""
        description = REGISTRY.get("ticktick_update_tag").description
        assert "'rename'" in description
        assert "'merge'" in description
        assert REGISTRY.get("ticktick_rename_tag").path == "/tag/rename"
        assert REGISTRY.get("ticktick_merge_tags").path == "/tag/merge"


class TestCamelize:
    """Tests for snake_case to camelCase conversion."""

    def test_nested_structures(self):
        """Test conversion through dicts and lists."""
        value = {"due_date": "x", "items": [{"start_date": "y", "is_all_day": True}]}
        assert camelize(value) == {"dueDate": "x", "items": [{"startDate": "y", "isAllDay": True}]}

    def test_scalars_untouched(self):
        """Test that non-container values pass through."""
        assert camelize("time_zone") == "time_zone"
        assert camelize(3) == 3
