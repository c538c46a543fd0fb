"""Persistence layer for bookings."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Query, Session, aliased

from app.domain.entities import Booking, BookingStatus
from app.infrastructure.models import (
    BookingModel,
    ChurchModel,
    ServiceModel,
    UserModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

Parishioner = aliased(UserModel, name="parishioner")
Priest = aliased(UserModel, name="priest")


class BookingRepository:
    """Provide storage operations for :class:`Booking` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Booking]:
        query = self._detailed_query().order_by(
            BookingModel.created_at.desc(), BookingModel.id.desc()
        )
        return [self._to_entity(*row) for row in query.all()]

    def get(self, booking_id: int) -> Booking | None:
        row = self._detailed_query().filter(BookingModel.id == booking_id).first()
        return self._to_entity(*row) if row else None

    def create(self, booking: Booking) -> Booking:
        model = BookingModel(
            service_id=booking.service_id,
            parishioner_id=booking.parishioner_id,
            church_id=booking.church_id,
            priest_id=booking.priest_id,
            amount_paise=booking.amount_paise,
            status=booking.status.value,
            created_by=booking.created_by,
        )
        if booking.created_at is not None:
            model.created_at = ensure_app_naive_datetime(booking.created_at)
        self.session.add(model)
        self.session.flush()
        return self.get(model.id)

    def update_status(self, booking_id: int, status: BookingStatus) -> bool:
        updated = (
            self.session.query(BookingModel)
            .filter(BookingModel.id == booking_id)
            .update({BookingModel.status: status.value}, synchronize_session=False)
        )
        return updated > 0

    def _detailed_query(self) -> Query:
        return (
            self.session.query(
                BookingModel,
                Parishioner.name,
                ServiceModel.name,
                ChurchModel.name,
                Priest.name,
            )
            .join(Parishioner, BookingModel.parishioner_id == Parishioner.id)
            .join(ServiceModel, BookingModel.service_id == ServiceModel.id)
            .join(ChurchModel, BookingModel.church_id == ChurchModel.id)
            .outerjoin(Priest, BookingModel.priest_id == Priest.id)
        )

    @staticmethod
    def _to_entity(
        model: BookingModel,
        parishioner_name: str | None = None,
        service_name: str | None = None,
        church_name: str | None = None,
        priest_name: str | None = None,
    ) -> Booking:
        return Booking(
            id=model.id,
            service_id=model.service_id,
            parishioner_id=model.parishioner_id,
            church_id=model.church_id,
            priest_id=model.priest_id,
            amount_paise=model.amount_paise,
            status=BookingStatus(model.status),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            parishioner_name=parishioner_name,
            service_name=service_name,
            church_name=church_name,
            priest_name=priest_name,
        )


__all__ = ["BookingRepository"]
