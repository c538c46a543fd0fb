"""Use cases for recording payments and reviewing them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any

import logging

from sqlalchemy.orm import Session

from app.domain.entities import (
    PaymentMethod,
    Transaction,
    TransactionStatus,
    compute_split_shares,
)
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import (
    BookingRepository,
    ChurchRepository,
    ServiceRepository,
    TransactionRepository,
    UserRepository,
)
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def list_transactions(
    session: Session,
    *,
    church_id: int | None = None,
    method: str | None = None,
    status: str | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
) -> Sequence[Transaction]:
    return TransactionRepository(session).list(
        church_id=church_id,
        method=PaymentMethod.parse(method) if method else None,
        status=TransactionStatus.parse(status) if status else None,
        start=start,
        end=end,
    )


def list_church_transactions(session: Session, church_id: int) -> Sequence[Transaction]:
    return TransactionRepository(session).list(church_id=church_id)


def list_pending_reviews(
    session: Session, *, church_id: int | None = None
) -> Sequence[Transaction]:
    """Offline payments waiting for a manual check, latest recorded first."""

    return TransactionRepository(session).list_pending_review(church_id=church_id)


def get_transaction(session: Session, transaction_id: int) -> Transaction:
    """Return the transaction with its amount split per beneficiary.

    Splits come from the booked service's configuration and are applied to
    the amount actually paid. Transactions without a booking have no splits.
    """

    repository = TransactionRepository(session)
    transaction = repository.get(transaction_id)
    if transaction is None:
        raise NotFoundError("Transaction not found")

    service_id = repository.get_service_id(transaction_id)
    if service_id is None:
        return transaction
    service = ServiceRepository(session).get(service_id)
    if service is None:
        return transaction
    return replace(
        transaction,
        splits=compute_split_shares(transaction.amount_paise, service.splits),
    )


def create_transaction(
    session: Session,
    *,
    church_id: int,
    amount_paise: int,
    method: str,
    status: str | None = None,
    booking_id: int | None = None,
    razorpay_order_id: str | None = None,
    razorpay_payment_id: str | None = None,
    gateway_response: dict[str, Any] | None = None,
    proof_url: str | None = None,
    recorded_by: int | None = None,
) -> Transaction:
    """Record a payment.

    Without an explicit ``status`` a payment that comes with a proof upload
    waits in ``PENDING_REVIEW``; anything else starts ``PENDING``.
    """

    payment_method = PaymentMethod.parse(method)
    if status:
        initial_status = TransactionStatus.parse(status)
    elif proof_url:
        initial_status = TransactionStatus.PENDING_REVIEW
    else:
        initial_status = TransactionStatus.PENDING
    if amount_paise <= 0:
        raise ValidationError("amount_paise must be greater than zero")

    with unit_of_work(session):
        if ChurchRepository(session).get(church_id) is None:
            raise NotFoundError("Church not found")
        if booking_id is not None:
            booking = BookingRepository(session).get(booking_id)
            if booking is None:
                raise NotFoundError("Booking not found")
            if booking.church_id != church_id:
                raise ValidationError("Booking belongs to a different church")
        if recorded_by is not None and UserRepository(session).get(recorded_by) is None:
            raise NotFoundError("User not found")

        transaction = TransactionRepository(session).create(
            Transaction(
                id=None,
                booking_id=booking_id,
                church_id=church_id,
                amount_paise=amount_paise,
                method=payment_method,
                status=initial_status,
                razorpay_order_id=razorpay_order_id,
                razorpay_payment_id=razorpay_payment_id,
                gateway_response=gateway_response,
                proof_url=proof_url,
                recorded_by=recorded_by,
                recorded_at=now_in_app_timezone(),
            )
        )

    logger.info(
        "Transaction %s recorded for church %s (%s, %s)",
        transaction.id,
        church_id,
        payment_method.value,
        initial_status.value,
    )
    return transaction


def update_transaction_status(
    session: Session, transaction_id: int, status: str
) -> Transaction:
    new_status = TransactionStatus.parse(status)
    with unit_of_work(session):
        if not TransactionRepository(session).update_status(transaction_id, new_status):
            raise NotFoundError("Transaction not found")
    return get_transaction(session, transaction_id)


__all__ = [
    "create_transaction",
    "get_transaction",
    "list_church_transactions",
    "list_pending_reviews",
    "list_transactions",
    "update_transaction_status",
]
