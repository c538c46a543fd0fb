"""SQLAlchemy model for payment transactions."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String

from app.domain.entities import TransactionStatus
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class TransactionModel(Base):
    """A payment, online through the gateway or recorded by church staff."""

    __tablename__ = "transaction"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("booking.id"), nullable=True, index=True)
    church_id = Column(Integer, ForeignKey("church.id"), nullable=False, index=True)
    amount_paise = Column(Integer, nullable=False)
    method = Column(String(20), nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=TransactionStatus.PENDING.value,
        server_default=TransactionStatus.PENDING.value,
        index=True,
    )
    razorpay_order_id = Column(String(64), nullable=True)
    razorpay_payment_id = Column(String(64), nullable=True)
    gateway_response = Column(JSON, nullable=True)
    proof_url = Column(String(255), nullable=True)
    recorded_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    recorded_at = Column(DateTime, nullable=True)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["TransactionModel"]
