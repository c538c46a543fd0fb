"""Use cases for service bookings."""

from __future__ import annotations

from collections.abc import Sequence

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Booking, BookingStatus
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import (
    BookingRepository,
    ChurchRepository,
    ServiceRepository,
    UserRepository,
)
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def list_bookings(session: Session) -> Sequence[Booking]:
    return BookingRepository(session).list()


def get_booking(session: Session, booking_id: int) -> Booking:
    booking = BookingRepository(session).get(booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def create_booking(
    session: Session,
    *,
    service_id: int | None,
    parishioner_id: int | None,
    church_id: int | None,
    amount_paise: int | None,
    priest_id: int | None = None,
) -> Booking:
    """Book ``service_id`` for a parishioner; new bookings start ``PENDING``.

    The service must be offered by ``church_id`` and ``priest_id``, when
    given, must be a priest.
    """

    if not service_id or not parishioner_id or not church_id or not amount_paise:
        raise ValidationError("Missing required fields")
    if amount_paise < 0:
        raise ValidationError("amount_paise cannot be negative")

    users = UserRepository(session)
    with unit_of_work(session):
        service = ServiceRepository(session).get(service_id)
        if service is None:
            raise NotFoundError("Service not found")
        if ChurchRepository(session).get(church_id) is None:
            raise NotFoundError("Church not found")
        if service.church_id != church_id:
            raise ValidationError("Service is not offered by this church")
        if users.get(parishioner_id) is None:
            raise NotFoundError("Parishioner not found")
        if priest_id is not None:
            priest = users.get(priest_id)
            if priest is None:
                raise NotFoundError("Priest not found")
            if not priest.is_priest():
                raise ValidationError("Assigned user is not a priest")

        booking = BookingRepository(session).create(
            Booking(
                id=None,
                service_id=service_id,
                parishioner_id=parishioner_id,
                church_id=church_id,
                priest_id=priest_id,
                amount_paise=amount_paise,
                status=BookingStatus.PENDING,
                created_by=parishioner_id,
                created_at=now_in_app_timezone(),
            )
        )

    logger.info("Booking %s created for service %s", booking.id, service_id)
    return booking


def update_booking_status(session: Session, booking_id: int, status: str) -> Booking:
    """Move the booking to ``status``; unknown names are rejected before any write."""

    new_status = BookingStatus.parse(status)
    repository = BookingRepository(session)
    with unit_of_work(session):
        if not repository.update_status(booking_id, new_status):
            raise NotFoundError("Booking not found")
    return get_booking(session, booking_id)


__all__ = [
    "create_booking",
    "get_booking",
    "list_bookings",
    "update_booking_status",
]
