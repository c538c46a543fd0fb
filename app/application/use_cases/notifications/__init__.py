"""Use cases for notification fan-out and delivery tracking."""

from .create_notification import create_notification
from .list_notifications import list_notifications, list_user_notifications
from .mark_delivered import mark_delivered
from .recipients import resolve_recipients

__all__ = [
    "create_notification",
    "list_notifications",
    "list_user_notifications",
    "mark_delivered",
    "resolve_recipients",
]
