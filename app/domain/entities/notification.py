"""Domain entities for notifications and their per-recipient delivery."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.exceptions import InvalidTargetError

from .choices import Choice


class TargetType(Choice):
    """Audience a notification is addressed to."""

    USER = "USER"
    PRIEST = "PRIEST"
    CHURCH = "CHURCH"
    FORANE = "FORANE"
    DIOCESE = "DIOCESE"
    ALL = "ALL"

    @classmethod
    def invalid(cls, value: object) -> InvalidTargetError:
        return InvalidTargetError(value)

    @property
    def requires_target_id(self) -> bool:
        return self not in (TargetType.PRIEST, TargetType.ALL)


class DeliveryStatus(Choice):
    """Delivery state of a notification for one recipient."""

    PENDING = "PENDING"
    SENT = "SENT"


@dataclass
class Notification:
    """A message sent once to every user matched by its target."""

    id: int | None
    sender_id: int
    target_type: TargetType
    target_id: int | None
    message: str
    created_at: datetime | None = None


@dataclass
class DeliveryRecord:
    """Tracks whether ``notification_id`` reached ``user_id``."""

    notification_id: int
    user_id: int
    status: DeliveryStatus = DeliveryStatus.PENDING
    attempt_count: int = 0
    last_attempt_at: datetime | None = None


@dataclass
class NotificationEntry:
    """Row returned by the notification listings.

    ``recipient_id`` and the delivery fields are ``None`` for a notification
    that matched nobody.
    """

    notification: Notification
    sender_name: str | None
    recipient_id: int | None
    delivery_status: DeliveryStatus | None
    attempt_count: int | None
    last_attempt_at: datetime | None


@dataclass(frozen=True)
class NotificationFanout:
    """Outcome of creating a notification."""

    notification_id: int
    recipients_count: int


__all__ = [
    "DeliveryRecord",
    "DeliveryStatus",
    "Notification",
    "NotificationEntry",
    "NotificationFanout",
    "TargetType",
]
