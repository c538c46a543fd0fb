"""Domain entities for payments received by a church."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.exceptions import ValidationError

from .choices import Choice
from .service import SplitShare


class PaymentMethod(Choice):
    RAZORPAY = "RAZORPAY"
    UPI = "UPI"
    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"

    @classmethod
    def invalid(cls, value: object) -> ValidationError:
        return ValidationError("Invalid payment method")


class TransactionStatus(Choice):
    """``PENDING_REVIEW`` marks offline payments awaiting a manual check."""

    PENDING = "PENDING"
    PENDING_REVIEW = "PENDING_REVIEW"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


@dataclass
class Transaction:
    id: int | None
    church_id: int
    amount_paise: int
    method: PaymentMethod
    status: TransactionStatus = TransactionStatus.PENDING
    booking_id: int | None = None
    razorpay_order_id: str | None = None
    razorpay_payment_id: str | None = None
    gateway_response: dict[str, Any] | None = None
    proof_url: str | None = None
    recorded_by: int | None = None
    recorded_at: datetime | None = None
    created_at: datetime | None = None
    church_name: str | None = None
    service_name: str | None = None
    parishioner_name: str | None = None
    recorded_by_name: str | None = None
    splits: list[SplitShare] = field(default_factory=list)


__all__ = ["PaymentMethod", "Transaction", "TransactionStatus"]
