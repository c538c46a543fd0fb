"""Use cases for calendar events."""

from .manage_events import (
    create_event,
    delete_event,
    get_event,
    list_church_events,
    list_events,
    list_priest_events,
    update_event,
)

__all__ = [
    "create_event",
    "delete_event",
    "get_event",
    "list_church_events",
    "list_events",
    "list_priest_events",
    "update_event",
]
