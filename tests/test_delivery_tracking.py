"""Tests for delivery tracking and the notification listings."""

import pytest

from app.application.use_cases.notifications import (
    create_notification,
    list_notifications,
    list_user_notifications,
    mark_delivered,
)
from app.domain.entities import DeliveryStatus
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import NotificationRepository


@pytest.fixture()
def forane_notification(db_session, diocese_example):
    return create_notification(
        db_session,
        sender_id=50,
        target_type="FORANE",
        target_id=10,
        message="Retreat registration is open",
    )


def test_mark_delivered_sets_sent_and_counts_attempt(db_session, forane_notification):
    record = mark_delivered(
        db_session, notification_id=forane_notification.notification_id, user_id=3
    )

    assert record.status is DeliveryStatus.SENT
    assert record.attempt_count == 1
    assert record.last_attempt_at is not None
    assert record.last_attempt_at.tzinfo is not None


def test_repeated_delivery_keeps_sent_and_increments(db_session, forane_notification):
    notification_id = forane_notification.notification_id
    mark_delivered(db_session, notification_id=notification_id, user_id=1)
    second = mark_delivered(db_session, notification_id=notification_id, user_id=1)

    assert second.status is DeliveryStatus.SENT
    assert second.attempt_count == 2


def test_non_recipient_is_not_found_and_nothing_changes(db_session, forane_notification):
    notification_id = forane_notification.notification_id
    repository = NotificationRepository(db_session)
    before = repository.list_recipients(notification_id)

    with pytest.raises(NotFoundError) as exc_info:
        mark_delivered(db_session, notification_id=notification_id, user_id=4)

    assert exc_info.value.message == "Recipient not found"
    assert repository.list_recipients(notification_id) == before


def test_unknown_notification_is_not_found(db_session, forane_notification):
    with pytest.raises(NotFoundError):
        mark_delivered(db_session, notification_id=12345, user_id=1)


def test_user_listing_is_newest_first_with_status(db_session, forane_notification):
    later = create_notification(
        db_session,
        sender_id=50,
        target_type="USER",
        target_id=3,
        message="Personal reminder",
    )
    mark_delivered(
        db_session, notification_id=forane_notification.notification_id, user_id=3
    )

    entries = list_user_notifications(db_session, 3)

    assert [entry.notification.id for entry in entries] == [
        later.notification_id,
        forane_notification.notification_id,
    ]
    assert entries[0].delivery_status is DeliveryStatus.PENDING
    assert entries[1].delivery_status is DeliveryStatus.SENT
    assert entries[1].attempt_count == 1
    assert all(entry.sender_name == "User 50" for entry in entries)
    assert list_user_notifications(db_session, 4) == []


def test_list_all_has_one_row_per_recipient(db_session, forane_notification):
    entries = list_notifications(db_session)

    assert [entry.recipient_id for entry in entries] == [1, 2, 3]
    assert {entry.notification.id for entry in entries} == {
        forane_notification.notification_id
    }


def test_list_all_keeps_notifications_without_recipients(db_session, forane_notification):
    empty = create_notification(
        db_session,
        sender_id=50,
        target_type="CHURCH",
        target_id=404,
        message="Nobody home",
    )

    entries = list_notifications(db_session)

    assert entries[0].notification.id == empty.notification_id
    assert entries[0].recipient_id is None
    assert entries[0].delivery_status is None


def test_list_all_filters_by_recipient(db_session, forane_notification):
    entries = list_notifications(db_session, user_id=2)

    assert len(entries) == 1
    assert entries[0].recipient_id == 2
    assert list_notifications(db_session, user_id=4) == []
