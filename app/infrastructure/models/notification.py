"""SQLAlchemy models for notifications and their recipients."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, text

from app.domain.entities import DeliveryStatus
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a notification as sent."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    target_type = Column(String(20), nullable=False)
    target_id = Column(Integer, nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )


class NotificationRecipientModel(Base):
    """Delivery state of one notification for one recipient."""

    __tablename__ = "notification_recipient"

    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id = Column(Integer, ForeignKey("user.id"), primary_key=True, index=True)
    status = Column(
        String(20),
        nullable=False,
        default=DeliveryStatus.PENDING.value,
        server_default=DeliveryStatus.PENDING.value,
    )
    attempt_count = Column(Integer, nullable=False, default=0, server_default=text("0"))
    last_attempt_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel", "NotificationRecipientModel"]
