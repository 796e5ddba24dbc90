"""Calendar tools."""

from __future__ import annotations

from ticktick_open_mcp.tools.formatting import confirmation, detail, listing
from ticktick_open_mcp.tools.inputs import (
    CalendarAccountInput,
    CalendarEventsInput,
    CalendarSubscribeInput,
    EventCreateInput,
    EventIdInput,
    EventUpdateInput,
    NoArgsInput,
    SubscriptionIdInput,
)
from ticktick_open_mcp.tools.registry import ToolSpec

TOOLS = [
    ToolSpec(
        name="ticktick_get_calendar_accounts",
        title="Calendar Accounts",
        description="List linked calendar accounts and subscriptions.",
        input_model=NoArgsInput,
        method="GET",
        path="/calendar/account",
        formatter=listing("calendar_account", "Calendar Accounts"),
    ),
    ToolSpec(
        name="ticktick_get_calendar_events",
        title="List Events",
        description="List calendar events between two dates, optionally for one calendar.",
        input_model=CalendarEventsInput,
        method="GET",
        path="/calendar/event",
        query=("start_date", "end_date", "calendar_id"),
        formatter=listing("event", "Calendar Events"),
    ),
    ToolSpec(
        name="ticktick_get_calendar_event",
        title="Get Event",
        description="Get a calendar event by ID.",
        input_model=EventIdInput,
        method="GET",
        path="/calendar/event/{event_id}",
        formatter=detail("event", "Calendar Event"),
    ),
    ToolSpec(
        name="ticktick_create_calendar_event",
        title="Create Event",
        description="Create a calendar event with a title, start and end.",
        input_model=EventCreateInput,
        method="POST",
        path="/calendar/event",
        formatter=detail("event", "Event Created"),
    ),
    ToolSpec(
        name="ticktick_update_calendar_event",
        title="Update Event",
        description="Update the provided fields of a calendar event.",
        input_model=EventUpdateInput,
        method="PUT",
        path="/calendar/event/{event_id}",
        formatter=detail("event", "Event Updated"),
    ),
    ToolSpec(
        name="ticktick_delete_calendar_event",
        title="Delete Event",
        description="Delete a calendar event.",
        input_model=EventIdInput,
        method="DELETE",
        path="/calendar/event/{event_id}",
        formatter=confirmation("🗑️ Event `{event_id}` deleted."),
    ),
    ToolSpec(
        name="ticktick_subscribe_calendar",
        title="Subscribe Calendar",
        description="Subscribe to an external iCal feed (http, https or webcal URL).",
        input_model=CalendarSubscribeInput,
        method="POST",
        path="/calendar/subscription",
        formatter=detail("calendar_account", "Calendar Subscribed"),
    ),
    ToolSpec(
        name="ticktick_unsubscribe_calendar",
        title="Unsubscribe Calendar",
        description="Remove a calendar subscription.",
        input_model=SubscriptionIdInput,
        method="DELETE",
        path="/calendar/subscription/{subscription_id}",
        formatter=confirmation("🗑️ Calendar subscription `{subscription_id}` removed."),
    ),
    ToolSpec(
        name="ticktick_sync_calendar",
        title="Sync Calendar",
        description="Ask TickTick to refresh a linked calendar account now.",
        input_model=CalendarAccountInput,
        method="POST",
        path="/calendar/account/{account_id}/sync",
        formatter=confirmation("🔄 Calendar account `{account_id}` sync requested."),
    ),
]
