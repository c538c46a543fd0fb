"""Use cases for bookings."""

from .manage_bookings import (
    create_booking,
    get_booking,
    list_bookings,
    update_booking_status,
)

__all__ = [
    "create_booking",
    "get_booking",
    "list_bookings",
    "update_booking_status",
]
