"""Endpoints for sending notifications and tracking their delivery."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    create_notification as create_notification_uc,
    list_notifications as list_notifications_uc,
    list_user_notifications as list_user_notifications_uc,
    mark_delivered as mark_delivered_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    DataResponse,
    DeliveryRecordRead,
    NotificationCreate,
    NotificationCreateResponse,
    NotificationDeliveredRequest,
    NotificationRead,
)

router = APIRouter(
    prefix="/notifications", tags=["notifications"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[NotificationRead]])
def list_notifications(
    user_id: int | None = Query(
        default=None, description="Only return notifications received by this user"
    ),
    db: Session = Depends(get_db),
):
    """Return every notification with its per-recipient delivery status."""

    entries = list_notifications_uc(db, user_id=user_id)
    return DataResponse(data=[NotificationRead.from_entry(entry) for entry in entries])


@router.get("/user/{user_id}", response_model=DataResponse[list[NotificationRead]])
def list_user_notifications(user_id: int, db: Session = Depends(get_db)):
    """Return the notifications received by ``user_id``, newest first."""

    entries = list_user_notifications_uc(db, user_id)
    return DataResponse(data=[NotificationRead.from_entry(entry) for entry in entries])


@router.post(
    "",
    response_model=NotificationCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_notification(payload: NotificationCreate, db: Session = Depends(get_db)):
    """Create a notification and one pending delivery record per recipient."""

    result = create_notification_uc(
        db,
        sender_id=payload.sender_id,
        target_type=payload.target_type,
        target_id=payload.target_id,
        message=payload.message,
    )
    return NotificationCreateResponse(
        notification_id=result.notification_id,
        recipients_count=result.recipients_count,
    )


@router.patch("/delivered", response_model=DataResponse[DeliveryRecordRead])
def mark_delivered(payload: NotificationDeliveredRequest, db: Session = Depends(get_db)):
    """Record a delivery attempt for one recipient and flag it as sent."""

    record = mark_delivered_uc(
        db, notification_id=payload.notification_id, user_id=payload.user_id
    )
    return DataResponse(
        message="Marked as delivered", data=DeliveryRecordRead.from_entity(record)
    )
