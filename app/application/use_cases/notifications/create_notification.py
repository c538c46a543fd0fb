"""Use case for creating a notification and fanning it out to recipients."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationFanout, TargetType
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import now_in_app_timezone

from .recipients import resolve_recipients

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    sender_id: int,
    target_type: TargetType | str,
    target_id: int | None,
    message: str,
) -> NotificationFanout:
    """Persist a notification plus one ``PENDING`` delivery record per recipient.

    The target type is checked before anything is written. The notification
    and its delivery records are committed together: if any step fails the
    whole fan-out is rolled back. A target that matches nobody still creates
    the notification and reports ``recipients_count == 0``.
    """

    target = TargetType.parse(target_type)
    if target.requires_target_id and target_id is None:
        raise ValidationError(f"target_id is required for target type {target.value}")
    if not message or not message.strip():
        raise ValidationError("message is required")

    repository = NotificationRepository(session)
    with unit_of_work(session):
        if UserRepository(session).get(sender_id) is None:
            raise NotFoundError("Sender not found")

        notification = repository.add(
            Notification(
                id=None,
                sender_id=sender_id,
                target_type=target,
                target_id=target_id,
                message=message,
                created_at=now_in_app_timezone(),
            )
        )
        recipients = resolve_recipients(session, target, target_id)
        recipients_count = repository.add_recipients(notification.id, sorted(recipients))

    logger.info(
        "Notification %s (%s:%s) fanned out to %s recipient(s)",
        notification.id,
        target.value,
        target_id,
        recipients_count,
    )
    return NotificationFanout(
        notification_id=notification.id, recipients_count=recipients_count
    )


__all__ = ["create_notification"]
