"""Aggregate application use cases."""

from .notifications import create_notification, mark_delivered
from .users import create_user

__all__ = [
    "create_notification",
    "create_user",
    "mark_delivered",
]
