"""Persistence helpers for notifications and their delivery records.

Writes only ``flush``; committing is left to the caller so a notification and
its recipients are persisted in the same transaction.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy.orm import Query, Session

from app.domain.entities import (
    DeliveryRecord,
    DeliveryStatus,
    Notification,
    NotificationEntry,
    TargetType,
)
from app.infrastructure.models import (
    NotificationModel,
    NotificationRecipientModel,
    UserModel,
)
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide storage operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, notification: Notification) -> Notification:
        model = NotificationModel(
            sender_id=notification.sender_id,
            target_type=notification.target_type.value,
            target_id=notification.target_id,
            message=notification.message,
        )
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def add_recipients(self, notification_id: int, user_ids: Iterable[int]) -> int:
        """Create one ``PENDING`` delivery record per user and return how many."""

        models = [
            NotificationRecipientModel(
                notification_id=notification_id,
                user_id=user_id,
                status=DeliveryStatus.PENDING.value,
                attempt_count=0,
            )
            for user_id in user_ids
        ]
        if not models:
            return 0
        self.session.add_all(models)
        self.session.flush()
        return len(models)

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def get_recipient(self, notification_id: int, user_id: int) -> DeliveryRecord | None:
        model = self.session.get(
            NotificationRecipientModel, (notification_id, user_id)
        )
        return self._recipient_to_entity(model) if model else None

    def list_recipients(self, notification_id: int) -> Sequence[DeliveryRecord]:
        query = (
            self.session.query(NotificationRecipientModel)
            .filter(NotificationRecipientModel.notification_id == notification_id)
            .order_by(NotificationRecipientModel.user_id)
        )
        return [self._recipient_to_entity(model) for model in query.all()]

    def mark_delivered(
        self, notification_id: int, user_id: int, *, attempted_at: datetime
    ) -> int:
        """Flag the pair as ``SENT`` and bump its counter in a single UPDATE.

        Returns the number of matched rows (``0`` or ``1``).
        """

        return (
            self.session.query(NotificationRecipientModel)
            .filter(
                NotificationRecipientModel.notification_id == notification_id,
                NotificationRecipientModel.user_id == user_id,
            )
            .update(
                {
                    NotificationRecipientModel.status: DeliveryStatus.SENT.value,
                    NotificationRecipientModel.last_attempt_at: ensure_app_naive_datetime(
                        attempted_at
                    ),
                    NotificationRecipientModel.attempt_count: (
                        NotificationRecipientModel.attempt_count + 1
                    ),
                },
                synchronize_session=False,
            )
        )

    def list_for_user(self, user_id: int) -> Sequence[NotificationEntry]:
        query = (
            self._entries_query(outer=False)
            .filter(NotificationRecipientModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entry(*row) for row in query.all()]

    def list_all(self, *, user_id: int | None = None) -> Sequence[NotificationEntry]:
        query = self._entries_query(outer=True)
        if user_id is not None:
            query = query.filter(NotificationRecipientModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(),
            NotificationModel.id.desc(),
            NotificationRecipientModel.user_id,
        )
        return [self._to_entry(*row) for row in query.all()]

    def _entries_query(self, *, outer: bool) -> Query:
        query = self.session.query(
            NotificationModel, UserModel.name, NotificationRecipientModel
        ).join(UserModel, NotificationModel.sender_id == UserModel.id)
        on_clause = NotificationRecipientModel.notification_id == NotificationModel.id
        if outer:
            return query.outerjoin(NotificationRecipientModel, on_clause)
        return query.join(NotificationRecipientModel, on_clause)

    @classmethod
    def _to_entry(
        cls,
        model: NotificationModel,
        sender_name: str | None,
        recipient: NotificationRecipientModel | None,
    ) -> NotificationEntry:
        return NotificationEntry(
            notification=cls._to_entity(model),
            sender_name=sender_name,
            recipient_id=recipient.user_id if recipient else None,
            delivery_status=DeliveryStatus(recipient.status) if recipient else None,
            attempt_count=recipient.attempt_count if recipient else None,
            last_attempt_at=(
                ensure_app_timezone(recipient.last_attempt_at) if recipient else None
            ),
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            sender_id=model.sender_id,
            target_type=TargetType(model.target_type),
            target_id=model.target_id,
            message=model.message,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _recipient_to_entity(model: NotificationRecipientModel) -> DeliveryRecord:
        return DeliveryRecord(
            notification_id=model.notification_id,
            user_id=model.user_id,
            status=DeliveryStatus(model.status),
            attempt_count=model.attempt_count,
            last_attempt_at=ensure_app_timezone(model.last_attempt_at),
        )


__all__ = ["NotificationRepository"]
