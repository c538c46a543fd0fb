"""Payment transaction schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.domain.entities import Transaction

from .common import paise_to_rupees
from .service import SplitShareRead


class TransactionCreate(BaseModel):
    church_id: int = Field(..., ge=1)
    amount_paise: int = Field(..., gt=0)
    method: str = Field(..., description="RAZORPAY, UPI, CASH or BANK_TRANSFER")
    status: str | None = Field(
        default=None,
        description="Defaults to PENDING_REVIEW with a proof_url, PENDING otherwise",
    )
    booking_id: int | None = None
    razorpay_order_id: str | None = Field(default=None, max_length=100)
    razorpay_payment_id: str | None = Field(default=None, max_length=100)
    gateway_response: dict[str, Any] | None = None
    proof_url: str | None = Field(default=None, max_length=255)
    recorded_by: int | None = None


class TransactionStatusUpdate(BaseModel):
    status: str


class TransactionRead(BaseModel):
    id: int
    booking_id: int | None
    church_id: int
    church_name: str | None
    service_name: str | None
    parishioner_name: str | None
    amount_paise: int
    amount_rupees: float
    method: str
    status: str
    razorpay_order_id: str | None
    razorpay_payment_id: str | None
    gateway_response: dict[str, Any] | None
    proof_url: str | None
    recorded_by: int | None
    recorded_by_name: str | None
    recorded_at: datetime | None
    created_at: datetime | None
    splits: list[SplitShareRead]

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionRead":
        return cls(
            id=transaction.id or 0,
            booking_id=transaction.booking_id,
            church_id=transaction.church_id,
            church_name=transaction.church_name,
            service_name=transaction.service_name,
            parishioner_name=transaction.parishioner_name,
            amount_paise=transaction.amount_paise,
            amount_rupees=paise_to_rupees(transaction.amount_paise),
            method=transaction.method.value,
            status=transaction.status.value,
            razorpay_order_id=transaction.razorpay_order_id,
            razorpay_payment_id=transaction.razorpay_payment_id,
            gateway_response=transaction.gateway_response,
            proof_url=transaction.proof_url,
            recorded_by=transaction.recorded_by,
            recorded_by_name=transaction.recorded_by_name,
            recorded_at=transaction.recorded_at,
            created_at=transaction.created_at,
            splits=[SplitShareRead.from_entity(share) for share in transaction.splits],
        )
