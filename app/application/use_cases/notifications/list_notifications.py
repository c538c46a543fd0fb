"""Use cases for reading notifications with their delivery state."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import NotificationEntry
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, *, user_id: int | None = None
) -> Sequence[NotificationEntry]:
    """Return every notification/recipient pair, newest first.

    With ``user_id`` only the rows delivered to that user are returned.
    """

    return NotificationRepository(session).list_all(user_id=user_id)


def list_user_notifications(session: Session, user_id: int) -> Sequence[NotificationEntry]:
    """Return the notifications received by ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id)


__all__ = ["list_notifications", "list_user_notifications"]
