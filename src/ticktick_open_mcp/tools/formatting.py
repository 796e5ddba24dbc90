"""
Markdown rendering for tool responses.

Rendering works on the display dicts produced by ``views``: each entity kind
has a detail template and a one-line template. The factories at the bottom
build the ``formatter(data, params)`` callables used by the tool catalogue.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic import BaseModel

from ticktick_open_mcp.tools import views

Formatter = Callable[[Any, BaseModel], str]


@dataclass(frozen=True)
class EntityTemplate:
    """How one kind of upstream entity is displayed."""

    singular: str
    plural: str
    shape: views.Shaper
    detail: str
    line: str


TEMPLATES: dict[str, EntityTemplate] = {
    "task": EntityTemplate(
        singular="task",
        plural="tasks",
        shape=views.shape_task,
        detail=(
            "## {check} {title}\n\n"
            "- **ID**: `{id}`\n"
            "- **Project**: `{project_id}`\n"
            "- **Status**: {status}\n"
            "- **Priority**: {priority}\n"
            "- **Start**: {start_date}\n"
            "- **Due**: {due_date}\n"
            "- **Tags**: {tags}\n"
            "- **Checklist Items**: {item_count}"
        ),
        line="- {check} **{title}** (`{id}`) | Due: {due_date} | Priority: {priority}",
    ),
    "project": EntityTemplate(
        singular="project",
        plural="projects",
        shape=views.shape_project,
        detail=(
            "## 📁 {name}\n\n"
            "- **ID**: `{id}`\n"
            "- **Kind**: {kind}\n"
            "- **View Mode**: {view_mode}\n"
            "- **Color**: {color}\n"
            "- **Folder**: `{group_id}`\n"
            "- **Archived**: {closed}"
        ),
        line="- 📁 **{name}** (`{id}`) | {kind}, {view_mode}",
    ),
    "folder": EntityTemplate(
        singular="folder",
        plural="folders",
        shape=views.shape_folder,
        detail="## 🗂️ {name}\n\n- **ID**: `{id}`",
        line="- 🗂️ **{name}** (`{id}`)",
    ),
    "column": EntityTemplate(
        singular="column",
        plural="columns",
        shape=views.shape_column,
        detail="## {name}\n\n- **ID**: `{id}`\n- **Project**: `{project_id}`\n- **Sort Order**: {sort_order}",
        line="- **{name}** (`{id}`)",
    ),
    "checklist_item": EntityTemplate(
        singular="checklist item",
        plural="checklist items",
        shape=views.shape_checklist_item,
        detail="## {check} {title}\n\n- **ID**: `{id}`\n- **Start**: {start_date}",
        line="- {check} {title} (`{id}`)",
    ),
    "activity": EntityTemplate(
        singular="activity",
        plural="activity entries",
        shape=views.shape_activity,
        detail="- **{action}** by {who} at {when}",
        line="- {when}: **{action}** by {who}",
    ),
    "tag": EntityTemplate(
        singular="tag",
        plural="tags",
        shape=views.shape_tag,
        detail="## 🏷️ {label}\n\n- **Name**: `{name}`\n- **Color**: {color}\n- **Parent**: {parent}",
        line="- 🏷️ **{label}** (`{name}`) | Color: {color}",
    ),
    "filter": EntityTemplate(
        singular="filter",
        plural="filters",
        shape=views.shape_filter,
        detail="## 🔎 {name}\n\n- **ID**: `{id}`\n- **Rule**: `{rule}`",
        line="- 🔎 **{name}** (`{id}`)",
    ),
    "habit": EntityTemplate(
        singular="habit",
        plural="habits",
        shape=views.shape_habit,
        detail=(
            "## 🔁 {name}\n\n"
            "- **ID**: `{id}`\n"
            "- **Type**: {type}\n"
            "- **Goal**: {goal} {unit}\n"
            "- **Repeat**: {repeat_rule}\n"
            "- **Total Check-ins**: {total_checkins}\n"
            "- **Current Streak**: {current_streak}\n"
            "- **Status**: {status}"
        ),
        line="- 🔁 **{name}** (`{id}`) | Streak: {current_streak} | {status}",
    ),
    "checkin": EntityTemplate(
        singular="check-in",
        plural="check-ins",
        shape=views.shape_checkin,
        detail="## ✔️ Check-in {stamp}\n\n- **Habit**: `{habit_id}`\n- **Value**: {value}\n- **Status**: {status}",
        line="- {stamp}: {value} ({status})",
    ),
    "habit_section": EntityTemplate(
        singular="habit section",
        plural="habit sections",
        shape=views.shape_habit_section,
        detail="## {name}\n\n- **ID**: `{id}`",
        line="- **{name}** (`{id}`)",
    ),
    "focus": EntityTemplate(
        singular="focus session",
        plural="focus sessions",
        shape=views.shape_focus,
        detail=(
            "## 🍅 Focus Session\n\n"
            "- **ID**: `{id}`\n"
            "- **Status**: {status}\n"
            "- **Mode**: {mode}\n"
            "- **Task**: `{task_id}`\n"
            "- **Duration**: {minutes} min\n"
            "- **Started**: {start_time}\n"
            "- **Ended**: {end_time}"
        ),
        line="- 🍅 {start_time}: {minutes} min ({mode}) | Task: `{task_id}`",
    ),
    "event": EntityTemplate(
        singular="event",
        plural="events",
        shape=views.shape_event,
        detail=(
            "## 📅 {title}\n\n"
            "- **ID**: `{id}`\n"
            "- **Start**: {start}\n"
            "- **End**: {end}\n"
            "- **All Day**: {all_day}\n"
            "- **Location**: {location}\n"
            "- **Calendar**: `{calendar_id}`"
        ),
        line="- 📅 **{title}** (`{id}`) | {start} to {end}",
    ),
    "calendar_account": EntityTemplate(
        singular="calendar account",
        plural="calendar accounts",
        shape=views.shape_calendar_account,
        detail="## 🗓️ {name}\n\n- **ID**: `{id}`\n- **Kind**: {kind}\n- **Calendars**: {calendar_count}",
        line="- 🗓️ **{name}** (`{id}`) | {kind} | Calendars: {calendar_count}",
    ),
    "member": EntityTemplate(
        singular="member",
        plural="members",
        shape=views.shape_member,
        detail="## 👤 {name}\n\n- **User ID**: `{user_id}`\n- **Email**: {email}\n- **Role**: {role}",
        line="- 👤 **{name}** (`{user_id}`) | {email} | {role}",
    ),
    "comment": EntityTemplate(
        singular="comment",
        plural="comments",
        shape=views.shape_comment,
        detail="## 💬 Comment `{id}`\n\n- **Author**: {author}\n- **Created**: {created}\n\n{text}",
        line="- 💬 **{author}** ({created}): {text}",
    ),
    "team": EntityTemplate(
        singular="team",
        plural="teams",
        shape=views.shape_team,
        detail="## 👥 {name}\n\n- **ID**: `{id}`\n- **Members**: {member_count}\n- **Description**: {description}",
        line="- 👥 **{name}** (`{id}`) | Members: {member_count}",
    ),
    "template": EntityTemplate(
        singular="template",
        plural="templates",
        shape=views.shape_template,
        detail="## 📋 {name}\n\n- **ID**: `{id}`\n- **Kind**: {kind}\n- **Items**: {item_count}",
        line="- 📋 **{name}** (`{id}`) | {kind}",
    ),
    "user": EntityTemplate(
        singular="user",
        plural="users",
        shape=views.shape_user,
        detail=(
            "## 👤 {name}\n\n"
            "- **Username**: {username}\n"
            "- **Email**: {email}\n"
            "- **Time Zone**: {time_zone}\n"
            "- **Pro**: {pro}\n"
            "- **Inbox ID**: `{inbox_id}`"
        ),
        line="- 👤 **{name}** ({username})",
    ),
}


# =============================================================================
# Rendering
# =============================================================================


def render_detail(kind: str, data: Any) -> str:
    template = TEMPLATES[kind]
    shaped = template.shape(data)
    text = template.detail.format_map(shaped)
    content = shaped.get("content")
    if content:
        text = f"{text}\n\n{content}"
    return text


def render_lines(kind: str, items: list[Any]) -> str:
    template = TEMPLATES[kind]
    if not items:
        return f"No {template.plural} found."
    return "\n".join(template.line.format_map(template.shape(item)) for item in items)


def render_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def humanize(key: str) -> str:
    """Turn a camelCase or snake_case key into a title ('focusTime' -> 'Focus Time')."""
    words = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", key).replace("_", " ")
    return " ".join(w[:1].upper() + w[1:] for w in words.split())


def render_summary(data: Any) -> str:
    if isinstance(data, list):
        return f"- **Entries**: {len(data)}"
    if not isinstance(data, Mapping) or not data:
        return "No data returned."
    lines = []
    for key, value in data.items():
        if isinstance(value, (list, tuple, dict)):
            value = f"{len(value)} entries"
        elif value is None or value == "":
            value = views.NOT_AVAILABLE
        lines.append(f"- **{humanize(str(key))}**: {value}")
    return "\n".join(lines)


def _items(data: Any, key: str | None) -> list[Any]:
    if key is not None and isinstance(data, Mapping):
        data = data.get(key)
    return data if isinstance(data, list) else []


def _arguments(params: BaseModel) -> dict[str, Any]:
    values = params.model_dump(mode="json")
    # list arguments are also exposed as "<name>_count"
    counts = {f"{key}_count": len(value) for key, value in values.items() if isinstance(value, list)}
    return {**values, **counts}


# =============================================================================
# Formatter Factories
# =============================================================================


def detail(kind: str, heading: str) -> Formatter:
    """Render a single entity under a heading."""

    def format_detail(data: Any, params: BaseModel) -> str:
        return f"# {heading}\n\n{render_detail(kind, data)}"

    return format_detail


def listing(kind: str, heading: str, key: str | None = None) -> Formatter:
    """Render a list of entities, optionally unwrapped from ``data[key]``."""

    def format_listing(data: Any, params: BaseModel) -> str:
        items = _items(data, key)
        return f"# {heading} ({len(items)})\n\n{render_lines(kind, items)}"

    return format_listing


def confirmation(message: str) -> Formatter:
    """Render a fixed message interpolated with the call's arguments."""

    def format_confirmation(data: Any, params: BaseModel) -> str:
        return message.format_map(_arguments(params))

    return format_confirmation


def summary(heading: str) -> Formatter:
    """Render a statistics payload as key/value bullets."""

    def format_summary(data: Any, params: BaseModel) -> str:
        return f"# {heading}\n\n{render_summary(data)}"

    return format_summary


# =============================================================================
# Bespoke Formatters
# =============================================================================


def format_project_data(data: Any, params: BaseModel) -> str:
    """Render ``/project/{id}/data``: the project, its tasks and its columns."""
    payload = data if isinstance(data, Mapping) else {}
    tasks = _items(payload, "tasks")
    columns = _items(payload, "columns")
    sections = [
        render_detail("project", payload.get("project")),
        f"### Tasks ({len(tasks)})\n\n{render_lines('task', tasks)}",
    ]
    if columns:
        sections.append(f"### Columns ({len(columns)})\n\n{render_lines('column', columns)}")
    return "# Project Data\n\n" + "\n\n".join(sections)


def format_habit_checkins(data: Any, params: BaseModel) -> str:
    """Render check-ins grouped per habit (``{"checkins": {habitId: [...]}}``)."""
    groups = data.get("checkins") if isinstance(data, Mapping) else None
    if not isinstance(groups, Mapping):
        groups = {}
    lines = ["# Habit Check-ins", ""]
    if not groups:
        lines.append("No check-ins found.")
        return "\n".join(lines)
    for habit_id, checkins in groups.items():
        checkins = checkins if isinstance(checkins, list) else []
        lines.append(f"## Habit `{habit_id}` ({len(checkins)})")
        lines.append("")
        lines.append(render_lines("checkin", checkins))
        lines.append("")
    return "\n".join(lines).rstrip()


def format_focus_status(data: Any, params: BaseModel) -> str:
    """Render the current focus session, if any."""
    if not isinstance(data, Mapping) or not data:
        return "# Focus Status\n\nNo focus session in progress."
    return f"# Focus Status\n\n{render_detail('focus', data)}"
