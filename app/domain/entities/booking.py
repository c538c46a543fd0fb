"""Domain entities for service bookings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .choices import Choice


class BookingStatus(Choice):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass
class Booking:
    """A parishioner's request for a service at a church.

    The ``*_name`` fields are filled in by reads and ignored on writes.
    """

    id: int | None
    service_id: int
    parishioner_id: int
    church_id: int
    amount_paise: int
    status: BookingStatus = BookingStatus.PENDING
    priest_id: int | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    parishioner_name: str | None = None
    service_name: str | None = None
    church_name: str | None = None
    priest_name: str | None = None


__all__ = ["Booking", "BookingStatus"]
