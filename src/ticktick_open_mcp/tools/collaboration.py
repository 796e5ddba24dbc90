"""Project sharing, comment and team tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import confirmation, detail, listing
from ticktick_open_mcp.tools.inputs import (
    CommentCreateInput,
    CommentRefInput,
    MemberPermissionInput,
    NoArgsInput,
    ProjectIdInput,
    ProjectMemberInput,
    ProjectShareInput,
    ProjectTaskInput,
    TaskAssignInput,
    TeamCreateInput,
    TeamIdInput,
    TeamInviteInput,
    TeamMemberInput,
    TeamUpdateInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    # =========================================================================
    # Project Sharing
    # =========================================================================
    ToolSpec(
        name="ticktick_share_project",
        title="Share Project",
        description="Invite people to a project by email with 'read', 'comment' or 'write' permission.",
        input_model=ProjectShareInput,
        method="POST",
        path="/project/{project_id}/share",
        formatter=confirmation("📨 Project `{project_id}` shared with {emails_count} people ({permission})."),
    ),
    ToolSpec(
        name="ticktick_get_project_members",
        title="Project Members",
        description="List the members of a shared project and their permissions.",
        input_model=ProjectIdInput,
        method="GET",
        path="/project/{project_id}/member",
        formatter=listing("member", "Project Members"),
    ),
    ToolSpec(
        name="ticktick_update_member_permission",
        title="Update Member Permission",
        description="Change a project member's permission.",
        input_model=MemberPermissionInput,
        method="PUT",
        path="/project/{project_id}/member/{user_id}",
        formatter=confirmation("🔐 Member `{user_id}` now has '{permission}' access to `{project_id}`."),
    ),
    ToolSpec(
        name="ticktick_remove_project_member",
        title="Remove Project Member",
        description="Remove a member from a shared project.",
        input_model=ProjectMemberInput,
        method="DELETE",
        path="/project/{project_id}/member/{user_id}",
        formatter=confirmation("🚪 Member `{user_id}` removed from project `{project_id}`."),
    ),
    ToolSpec(
        name="ticktick_assign_task",
        title="Assign Task",
        description="Assign a task in a shared project to a member.",
        input_model=TaskAssignInput,
        method="POST",
        path="/project/{project_id}/task/{task_id}/assign",
        formatter=confirmation("👤 Task `{task_id}` assigned to `{assignee}`."),
    ),
    # =========================================================================
    # Comments
    # =========================================================================
    ToolSpec(
        name="ticktick_get_task_comments",
        title="Task Comments",
        description="List the comments on a task.",
        input_model=ProjectTaskInput,
        method="GET",
        path="/project/{project_id}/task/{task_id}/comment",
        formatter=listing("comment", "Comments"),
    ),
    ToolSpec(
        name="ticktick_add_task_comment",
        title="Add Comment",
        description="Add a comment to a task.",
        input_model=CommentCreateInput,
        method="POST",
        path="/project/{project_id}/task/{task_id}/comment",
        formatter=detail("comment", "Comment Added"),
    ),
    ToolSpec(
        name="ticktick_delete_task_comment",
        title="Delete Comment",
        description="Delete a comment from a task.",
        input_model=CommentRefInput,
        method="DELETE",
        path="/project/{project_id}/task/{task_id}/comment/{comment_id}",
        formatter=confirmation("🗑️ Comment `{comment_id}` deleted."),
    ),
    # =========================================================================
    # Teams
    # =========================================================================
    ToolSpec(
        name="ticktick_get_teams",
        title="List Teams",
        description="List the teams the user belongs to.",
        input_model=NoArgsInput,
        method="GET",
        path="/team",
        formatter=listing("team", "Teams"),
    ),
    ToolSpec(
        name="ticktick_get_team",
        title="Get Team",
        description="Get a team by ID.",
        input_model=TeamIdInput,
        method="GET",
        path="/team/{team_id}",
        formatter=detail("team", "Team"),
    ),
    ToolSpec(
        name="ticktick_create_team",
        title="Create Team",
        description="Create a team; the creator becomes its admin.",
        input_model=TeamCreateInput,
        method="POST",
        path="/team",
        formatter=detail("team", "Team Created"),
    ),
    ToolSpec(
        name="ticktick_update_team",
        title="Update Team",
        description="Rename a team or change its description.",
        input_model=TeamUpdateInput,
        method="PUT",
        path="/team/{team_id}",
        formatter=detail("team", "Team Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_team",
        title="Delete Team",
        description="Delete a team.",
        input_model=TeamIdInput,
        method="DELETE",
        path="/team/{team_id}",
        formatter=confirmation("🗑️ Team `{team_id}` deleted."),
    ),
    ToolSpec(
        name="ticktick_get_team_members",
        title="Team Members",
        description="List the members of a team and their roles.",
        input_model=TeamIdInput,
        method="GET",
        path="/team/{team_id}/member",
        formatter=listing("member", "Team Members"),
    ),
    ToolSpec(
        name="ticktick_invite_team_member",
        title="Invite Team Member",
        description="Invite someone to a team by email as 'member' or 'admin'.",
        input_model=TeamInviteInput,
        method="POST",
        path="/team/{team_id}/member",
        formatter=confirmation("📨 Invitation sent to {email} for team `{team_id}` ({role})."),
    ),
    ToolSpec(
        name="ticktick_remove_team_member",
        title="Remove Team Member",
        description="Remove a member from a team.",
        input_model=TeamMemberInput,
        method="DELETE",
        path="/team/{team_id}/member/{user_id}",
        formatter=confirmation("🚪 Member `{user_id}` removed from team `{team_id}`."),
    ),
]
