"""SQLAlchemy model for service bookings."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.domain.entities import BookingStatus
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class BookingModel(Base):
    __tablename__ = "booking"

    id = Column(Integer, primary_key=True, index=True)
    service_id = Column(Integer, ForeignKey("service.id"), nullable=False, index=True)
    parishioner_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    church_id = Column(Integer, ForeignKey("church.id"), nullable=False, index=True)
    priest_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    amount_paise = Column(Integer, nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=BookingStatus.PENDING.value,
        server_default=BookingStatus.PENDING.value,
    )
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["BookingModel"]
