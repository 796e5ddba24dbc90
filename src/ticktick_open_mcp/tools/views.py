"""
Response shaping.

Pure functions turning upstream JSON into flat, display-ready dicts. Missing
fields are replaced with neutral defaults so rendering never fails:
``"Unknown"`` for names and states, ``"N/A"`` for dates and identifiers,
``0`` for counts and numbers.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from ticktick_open_mcp.constants import PRIORITY_LABELS, STATUS_LABELS

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"

Shaper = Callable[[Any], dict[str, Any]]


def _obj(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def _text(data: Mapping[str, Any], *keys: str, default: str = UNKNOWN) -> str:
    for key in keys:
        value = data.get(key)
        if value not in (None, ""):
            return str(value)
    return default


def _num(data: Mapping[str, Any], *keys: str) -> int | float:
    for key in keys:
        value = data.get(key)
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)):
            return value
    return 0


def _count(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    return len(value) if isinstance(value, (list, tuple, dict)) else 0


def _join(values: Any, default: str = "None") -> str:
    if isinstance(values, list) and values:
        return ", ".join(str(v) for v in values)
    return default


def _flag(value: Any) -> str:
    if value is None:
        return UNKNOWN
    return "Yes" if value else "No"


def priority_label(value: Any) -> str:
    try:
        return PRIORITY_LABELS[value]
    except (KeyError, TypeError):
        return UNKNOWN


def status_label(value: Any) -> str:
    try:
        return STATUS_LABELS[value]
    except (KeyError, TypeError):
        return UNKNOWN


def minutes(seconds: Any) -> int:
    """Convert a duration in seconds to whole minutes."""
    if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
        return int(seconds // 60)
    return 0


# =============================================================================
# Entity Shapers
# =============================================================================


def shape_task(data: Any) -> dict[str, Any]:
    task = _obj(data)
    status = task.get("status", 0)
    return {
        "id": _text(task, "id", default=NOT_AVAILABLE),
        "title": _text(task, "title", default="Untitled"),
        "project_id": _text(task, "projectId", default=NOT_AVAILABLE),
        "status": status_label(status),
        "check": "✅" if status == 2 else "⬜",
        "priority": priority_label(task.get("priority", 0)),
        "start_date": _text(task, "startDate", default=NOT_AVAILABLE),
        "due_date": _text(task, "dueDate", default=NOT_AVAILABLE),
        "tags": _join(task.get("tags")),
        "content": _text(task, "content", "desc", default=""),
        "item_count": _count(task, "items"),
    }


def shape_project(data: Any) -> dict[str, Any]:
    project = _obj(data)
    return {
        "id": _text(project, "id", default=NOT_AVAILABLE),
        "name": _text(project, "name"),
        "color": _text(project, "color", default=NOT_AVAILABLE),
        "view_mode": _text(project, "viewMode", default="list"),
        "kind": _text(project, "kind", default="TASK"),
        "closed": _flag(project.get("closed", False)),
        "group_id": _text(project, "groupId", default=NOT_AVAILABLE),
    }


def shape_folder(data: Any) -> dict[str, Any]:
    folder = _obj(data)
    return {
        "id": _text(folder, "id", default=NOT_AVAILABLE),
        "name": _text(folder, "name"),
    }


def shape_column(data: Any) -> dict[str, Any]:
    column = _obj(data)
    return {
        "id": _text(column, "id", default=NOT_AVAILABLE),
        "name": _text(column, "name"),
        "project_id": _text(column, "projectId", default=NOT_AVAILABLE),
        "sort_order": _num(column, "sortOrder"),
    }


def shape_checklist_item(data: Any) -> dict[str, Any]:
    item = _obj(data)
    status = item.get("status", 0)
    return {
        "id": _text(item, "id", default=NOT_AVAILABLE),
        "title": _text(item, "title", default="Untitled"),
        "check": "✅" if status == 1 else "⬜",
        "start_date": _text(item, "startDate", default=NOT_AVAILABLE),
    }


def shape_activity(data: Any) -> dict[str, Any]:
    entry = _obj(data)
    return {
        "action": _text(entry, "action", "type"),
        "when": _text(entry, "time", "createdTime", "when", default=NOT_AVAILABLE),
        "who": _text(entry, "userName", "username", "user"),
    }


def shape_tag(data: Any) -> dict[str, Any]:
    tag = _obj(data)
    return {
        "name": _text(tag, "name"),
        "label": _text(tag, "label", "name"),
        "color": _text(tag, "color", default=NOT_AVAILABLE),
        "parent": _text(tag, "parent", default=NOT_AVAILABLE),
    }


def shape_filter(data: Any) -> dict[str, Any]:
    saved = _obj(data)
    return {
        "id": _text(saved, "id", default=NOT_AVAILABLE),
        "name": _text(saved, "name"),
        "rule": _text(saved, "rule", default=NOT_AVAILABLE),
    }


def shape_habit(data: Any) -> dict[str, Any]:
    habit = _obj(data)
    return {
        "id": _text(habit, "id", default=NOT_AVAILABLE),
        "name": _text(habit, "name"),
        "type": _text(habit, "type", default="Boolean"),
        "goal": _num(habit, "goal"),
        "unit": _text(habit, "unit", default=""),
        "total_checkins": _num(habit, "totalCheckIns", "totalCheckins"),
        "current_streak": _num(habit, "currentStreak"),
        "status": "Archived" if habit.get("status") == 1 else "Active",
        "repeat_rule": _text(habit, "repeatRule", default=NOT_AVAILABLE),
    }


def shape_checkin(data: Any) -> dict[str, Any]:
    checkin = _obj(data)
    return {
        "habit_id": _text(checkin, "habitId", default=NOT_AVAILABLE),
        "stamp": _text(checkin, "checkinStamp", default=NOT_AVAILABLE),
        "value": _num(checkin, "value"),
        "status": "Done" if checkin.get("status") == 2 else "Partial" if checkin.get("value") else UNKNOWN,
    }


def shape_habit_section(data: Any) -> dict[str, Any]:
    section = _obj(data)
    return {
        "id": _text(section, "id", default=NOT_AVAILABLE),
        "name": _text(section, "name"),
    }


def shape_focus(data: Any) -> dict[str, Any]:
    session = _obj(data)
    duration = session.get("duration", session.get("focusDuration"))
    return {
        "id": _text(session, "id", default=NOT_AVAILABLE),
        "task_id": _text(session, "taskId", default=NOT_AVAILABLE),
        "status": _text(session, "status"),
        "mode": _text(session, "mode", "type", default="pomo"),
        "minutes": minutes(duration),
        "start_time": _text(session, "startTime", default=NOT_AVAILABLE),
        "end_time": _text(session, "endTime", default=NOT_AVAILABLE),
        "note": _text(session, "note", default=""),
    }


def shape_event(data: Any) -> dict[str, Any]:
    event = _obj(data)
    return {
        "id": _text(event, "id", default=NOT_AVAILABLE),
        "title": _text(event, "title", default="Untitled"),
        "start": _text(event, "startDate", "start", default=NOT_AVAILABLE),
        "end": _text(event, "endDate", "end", default=NOT_AVAILABLE),
        "all_day": _flag(event.get("isAllDay")),
        "location": _text(event, "location", default=NOT_AVAILABLE),
        "calendar_id": _text(event, "calendarId", default=NOT_AVAILABLE),
    }


def shape_calendar_account(data: Any) -> dict[str, Any]:
    account = _obj(data)
    return {
        "id": _text(account, "id", default=NOT_AVAILABLE),
        "name": _text(account, "name", "account"),
        "kind": _text(account, "kind", "site"),
        "calendar_count": _count(account, "calendars"),
    }


def shape_member(data: Any) -> dict[str, Any]:
    member = _obj(data)
    return {
        "user_id": _text(member, "userId", "id", default=NOT_AVAILABLE),
        "name": _text(member, "displayName", "name", "username"),
        "email": _text(member, "email", default=NOT_AVAILABLE),
        "role": _text(member, "permission", "role"),
    }


def shape_comment(data: Any) -> dict[str, Any]:
    comment = _obj(data)
    author = _obj(comment.get("userProfile"))
    return {
        "id": _text(comment, "id", default=NOT_AVAILABLE),
        "author": _text(author, "name", "displayName") if author else _text(comment, "userName", "author"),
        "text": _text(comment, "title", "text", default=""),
        "created": _text(comment, "createdTime", default=NOT_AVAILABLE),
    }


def shape_team(data: Any) -> dict[str, Any]:
    team = _obj(data)
    return {
        "id": _text(team, "id", default=NOT_AVAILABLE),
        "name": _text(team, "name"),
        "description": _text(team, "description", default=""),
        "member_count": _num(team, "memberCount") or _count(team, "members"),
    }


def shape_template(data: Any) -> dict[str, Any]:
    template = _obj(data)
    return {
        "id": _text(template, "id", default=NOT_AVAILABLE),
        "name": _text(template, "name", "title"),
        "kind": _text(template, "kind", default="task"),
        "item_count": _count(template, "items") or _count(template, "tasks"),
    }


def shape_user(data: Any) -> dict[str, Any]:
    user = _obj(data)
    return {
        "username": _text(user, "username", "email"),
        "name": _text(user, "name", "displayName"),
        "email": _text(user, "email", default=NOT_AVAILABLE),
        "time_zone": _text(user, "timeZone", default=NOT_AVAILABLE),
        "pro": _flag(user.get("pro")),
        "inbox_id": _text(user, "inboxId", default=NOT_AVAILABLE),
    }
