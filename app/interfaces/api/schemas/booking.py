"""Booking schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.domain.entities import Booking

from .common import paise_to_rupees


class BookingCreate(BaseModel):
    """Fields are optional here so missing ones are reported together."""

    service_id: int | None = None
    parishioner_id: int | None = None
    church_id: int | None = None
    amount_paise: int | None = None
    priest_id: int | None = None


class BookingStatusUpdate(BaseModel):
    status: str


class BookingRead(BaseModel):
    id: int
    service_id: int
    service_name: str | None
    parishioner_id: int
    parishioner_name: str | None
    church_id: int
    church_name: str | None
    priest_id: int | None
    priest_name: str | None
    amount_paise: int
    amount_rupees: float
    status: str
    created_by: int | None
    created_at: datetime | None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingRead":
        return cls(
            id=booking.id or 0,
            service_id=booking.service_id,
            service_name=booking.service_name,
            parishioner_id=booking.parishioner_id,
            parishioner_name=booking.parishioner_name,
            church_id=booking.church_id,
            church_name=booking.church_name,
            priest_id=booking.priest_id,
            priest_name=booking.priest_name,
            amount_paise=booking.amount_paise,
            amount_rupees=paise_to_rupees(booking.amount_paise),
            status=booking.status.value,
            created_by=booking.created_by,
            created_at=booking.created_at,
        )
