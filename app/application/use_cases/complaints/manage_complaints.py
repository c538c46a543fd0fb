"""Use cases for complaints raised by members."""

from __future__ import annotations

from collections.abc import Sequence

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Complaint, ComplaintStatus
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import (
    BookingRepository,
    ComplaintRepository,
    UserRepository,
)
from app.infrastructure.unit_of_work import unit_of_work

logger = logging.getLogger(__name__)


def list_complaints(session: Session) -> Sequence[Complaint]:
    return ComplaintRepository(session).list()


def list_user_complaints(session: Session, user_id: int) -> Sequence[Complaint]:
    return ComplaintRepository(session).list(user_id=user_id)


def get_complaint(session: Session, complaint_id: int) -> Complaint:
    complaint = ComplaintRepository(session).get(complaint_id)
    if complaint is None:
        raise NotFoundError("Complaint not found")
    return complaint


def create_complaint(
    session: Session,
    *,
    user_id: int,
    title: str,
    body: str,
    booking_id: int | None = None,
) -> Complaint:
    """Open a complaint, optionally about one of the user's bookings."""

    if not title or not title.strip() or not body or not body.strip():
        raise ValidationError("title and body are required")

    with unit_of_work(session):
        if UserRepository(session).get(user_id) is None:
            raise NotFoundError("User not found")
        if booking_id is not None and BookingRepository(session).get(booking_id) is None:
            raise NotFoundError("Booking not found")
        complaint = ComplaintRepository(session).create(
            Complaint(
                id=None,
                user_id=user_id,
                booking_id=booking_id,
                title=title.strip(),
                body=body.strip(),
                status=ComplaintStatus.OPEN,
            )
        )

    logger.info("Complaint %s opened by user %s", complaint.id, user_id)
    return complaint


def update_complaint_status(
    session: Session, complaint_id: int, status: str
) -> Complaint:
    new_status = ComplaintStatus.parse(status)
    with unit_of_work(session):
        if not ComplaintRepository(session).update_status(complaint_id, new_status):
            raise NotFoundError("Complaint not found")
    return get_complaint(session, complaint_id)


__all__ = [
    "create_complaint",
    "get_complaint",
    "list_complaints",
    "list_user_complaints",
    "update_complaint_status",
]
