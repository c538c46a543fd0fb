"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities import DeliveryRecord, DeliveryStatus, NotificationEntry


class NotificationCreate(BaseModel):
    """Payload used to send a notification to a target audience."""

    sender_id: int
    target_type: str = Field(
        ..., description="USER, PRIEST, CHURCH, FORANE, DIOCESE or ALL"
    )
    target_id: int | None = Field(
        default=None,
        description="User, church, forane or diocese id; ignored for PRIEST and ALL",
    )
    message: str = Field(..., min_length=1)


class NotificationDeliveredRequest(BaseModel):
    notification_id: int
    user_id: int


class NotificationRead(BaseModel):
    """A notification as seen by one recipient."""

    notification_id: int
    message: str
    created_at: datetime | None
    sender_id: int
    sender_name: str | None
    target_type: str
    target_id: int | None
    recipient_id: int | None
    delivery_status: DeliveryStatus | None
    attempt_count: int | None
    last_attempt_at: datetime | None

    @classmethod
    def from_entry(cls, entry: NotificationEntry) -> "NotificationRead":
        notification = entry.notification
        return cls(
            notification_id=notification.id or 0,
            message=notification.message,
            created_at=notification.created_at,
            sender_id=notification.sender_id,
            sender_name=entry.sender_name,
            target_type=notification.target_type.value,
            target_id=notification.target_id,
            recipient_id=entry.recipient_id,
            delivery_status=entry.delivery_status,
            attempt_count=entry.attempt_count,
            last_attempt_at=entry.last_attempt_at,
        )


class NotificationCreateResponse(BaseModel):
    success: bool = True
    message: str = "Notification created successfully"
    notification_id: int
    recipients_count: int


class DeliveryRecordRead(BaseModel):
    notification_id: int
    user_id: int
    status: DeliveryStatus
    attempt_count: int
    last_attempt_at: datetime | None

    @classmethod
    def from_entity(cls, record: DeliveryRecord) -> "DeliveryRecordRead":
        return cls(
            notification_id=record.notification_id,
            user_id=record.user_id,
            status=record.status,
            attempt_count=record.attempt_count,
            last_attempt_at=record.last_attempt_at,
        )


__all__ = [
    "DeliveryRecordRead",
    "NotificationCreate",
    "NotificationCreateResponse",
    "NotificationDeliveredRequest",
    "NotificationRead",
]
