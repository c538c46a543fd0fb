"""SQLAlchemy model for user complaints."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.domain.entities import ComplaintStatus
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ComplaintModel(Base):
    __tablename__ = "complaint"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    booking_id = Column(Integer, ForeignKey("booking.id"), nullable=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=ComplaintStatus.OPEN.value,
        server_default=ComplaintStatus.OPEN.value,
    )
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["ComplaintModel"]
