"""Persistence layer for payment transactions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Query, Session, aliased

from app.domain.entities import PaymentMethod, Transaction, TransactionStatus
from app.infrastructure.models import (
    BookingModel,
    ChurchModel,
    ServiceModel,
    TransactionModel,
    UserModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

Parishioner = aliased(UserModel, name="parishioner")
Recorder = aliased(UserModel, name="recorder")


class TransactionRepository:
    """Provide storage operations for :class:`Transaction` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        church_id: int | None = None,
        method: PaymentMethod | None = None,
        status: TransactionStatus | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Sequence[Transaction]:
        """Return transactions newest first, narrowed by every filter given."""

        query = self._detailed_query()
        if church_id is not None:
            query = query.filter(TransactionModel.church_id == church_id)
        if method is not None:
            query = query.filter(TransactionModel.method == method.value)
        if status is not None:
            query = query.filter(TransactionModel.status == status.value)
        if start is not None:
            query = query.filter(
                TransactionModel.created_at >= ensure_app_naive_datetime(start)
            )
        if end is not None:
            query = query.filter(
                TransactionModel.created_at <= ensure_app_naive_datetime(end)
            )
        query = query.order_by(
            TransactionModel.created_at.desc(), TransactionModel.id.desc()
        )
        return [self._to_entity(*row) for row in query.all()]

    def list_pending_review(self, *, church_id: int | None = None) -> Sequence[Transaction]:
        query = self._detailed_query().filter(
            TransactionModel.status == TransactionStatus.PENDING_REVIEW.value
        )
        if church_id is not None:
            query = query.filter(TransactionModel.church_id == church_id)
        query = query.order_by(
            TransactionModel.recorded_at.desc(), TransactionModel.id.desc()
        )
        return [self._to_entity(*row) for row in query.all()]

    def get(self, transaction_id: int) -> Transaction | None:
        row = self._detailed_query().filter(TransactionModel.id == transaction_id).first()
        return self._to_entity(*row) if row else None

    def get_service_id(self, transaction_id: int) -> int | None:
        """Return the service behind the transaction's booking, if it has one."""

        row = (
            self.session.query(BookingModel.service_id)
            .join(TransactionModel, TransactionModel.booking_id == BookingModel.id)
            .filter(TransactionModel.id == transaction_id)
            .first()
        )
        return row[0] if row else None

    def create(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(
            booking_id=transaction.booking_id,
            church_id=transaction.church_id,
            amount_paise=transaction.amount_paise,
            method=transaction.method.value,
            status=transaction.status.value,
            razorpay_order_id=transaction.razorpay_order_id,
            razorpay_payment_id=transaction.razorpay_payment_id,
            gateway_response=transaction.gateway_response,
            proof_url=transaction.proof_url,
            recorded_by=transaction.recorded_by,
            recorded_at=ensure_app_naive_datetime(transaction.recorded_at),
        )
        if transaction.created_at is not None:
            model.created_at = ensure_app_naive_datetime(transaction.created_at)
        self.session.add(model)
        self.session.flush()
        return self.get(model.id)

    def update_status(self, transaction_id: int, status: TransactionStatus) -> bool:
        updated = (
            self.session.query(TransactionModel)
            .filter(TransactionModel.id == transaction_id)
            .update({TransactionModel.status: status.value}, synchronize_session=False)
        )
        return updated > 0

    def _detailed_query(self) -> Query:
        return (
            self.session.query(
                TransactionModel,
                ChurchModel.name,
                ServiceModel.name,
                Parishioner.name,
                Recorder.name,
            )
            .join(ChurchModel, TransactionModel.church_id == ChurchModel.id)
            .outerjoin(BookingModel, TransactionModel.booking_id == BookingModel.id)
            .outerjoin(ServiceModel, BookingModel.service_id == ServiceModel.id)
            .outerjoin(Parishioner, BookingModel.parishioner_id == Parishioner.id)
            .outerjoin(Recorder, TransactionModel.recorded_by == Recorder.id)
        )

    @staticmethod
    def _to_entity(
        model: TransactionModel,
        church_name: str | None = None,
        service_name: str | None = None,
        parishioner_name: str | None = None,
        recorded_by_name: str | None = None,
    ) -> Transaction:
        return Transaction(
            id=model.id,
            booking_id=model.booking_id,
            church_id=model.church_id,
            amount_paise=model.amount_paise,
            method=PaymentMethod(model.method),
            status=TransactionStatus(model.status),
            razorpay_order_id=model.razorpay_order_id,
            razorpay_payment_id=model.razorpay_payment_id,
            gateway_response=model.gateway_response,
            proof_url=model.proof_url,
            recorded_by=model.recorded_by,
            recorded_at=ensure_app_timezone(model.recorded_at),
            created_at=ensure_app_timezone(model.created_at),
            church_name=church_name,
            service_name=service_name,
            parishioner_name=parishioner_name,
            recorded_by_name=recorded_by_name,
        )


__all__ = ["TransactionRepository"]
