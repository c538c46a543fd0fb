"""Persistence layer for complaints."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Query, Session

from app.domain.entities import Complaint, ComplaintStatus
from app.infrastructure.models import ComplaintModel, UserModel
from app.utils import ensure_app_timezone


class ComplaintRepository:
    """Provide storage operations for :class:`Complaint` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, user_id: int | None = None) -> Sequence[Complaint]:
        query = self._detailed_query()
        if user_id is not None:
            query = query.filter(ComplaintModel.user_id == user_id)
        query = query.order_by(ComplaintModel.created_at.desc(), ComplaintModel.id.desc())
        return [self._to_entity(*row) for row in query.all()]

    def get(self, complaint_id: int) -> Complaint | None:
        row = self._detailed_query().filter(ComplaintModel.id == complaint_id).first()
        return self._to_entity(*row) if row else None

    def create(self, complaint: Complaint) -> Complaint:
        model = ComplaintModel(
            user_id=complaint.user_id,
            booking_id=complaint.booking_id,
            title=complaint.title,
            body=complaint.body,
            status=complaint.status.value,
        )
        self.session.add(model)
        self.session.flush()
        return self.get(model.id)

    def update_status(self, complaint_id: int, status: ComplaintStatus) -> bool:
        updated = (
            self.session.query(ComplaintModel)
            .filter(ComplaintModel.id == complaint_id)
            .update({ComplaintModel.status: status.value}, synchronize_session=False)
        )
        return updated > 0

    def _detailed_query(self) -> Query:
        return self.session.query(ComplaintModel, UserModel.name).join(
            UserModel, ComplaintModel.user_id == UserModel.id
        )

    @staticmethod
    def _to_entity(model: ComplaintModel, complainant: str | None = None) -> Complaint:
        return Complaint(
            id=model.id,
            user_id=model.user_id,
            booking_id=model.booking_id,
            title=model.title,
            body=model.body,
            status=ComplaintStatus(model.status),
            created_at=ensure_app_timezone(model.created_at),
            complainant=complainant,
        )


__all__ = ["ComplaintRepository"]
