"""Use case for recording that a notification reached a recipient."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import DeliveryRecord
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import NotificationRepository
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def mark_delivered(
    session: Session, *, notification_id: int, user_id: int
) -> DeliveryRecord:
    """Set the delivery record to ``SENT`` and count the attempt.

    Every call increments ``attempt_count`` even when the record is already
    ``SENT``, so a retried request is recorded as another attempt. Raises
    :class:`NotFoundError` when ``user_id`` was never a recipient of
    ``notification_id``.
    """

    repository = NotificationRepository(session)
    with unit_of_work(session):
        updated = repository.mark_delivered(
            notification_id, user_id, attempted_at=now_in_app_timezone()
        )
        if not updated:
            logger.warning(
                "No delivery record for notification %s and user %s",
                notification_id,
                user_id,
            )
            raise NotFoundError("Recipient not found")

    record = repository.get_recipient(notification_id, user_id)
    if record is None:  # pragma: no cover - deleted between commit and read
        raise NotFoundError("Recipient not found")
    return record


__all__ = ["mark_delivered"]
