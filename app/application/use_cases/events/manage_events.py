"""Use cases for church and priest calendar events."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Event, EventEntityType, EventVisibility
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import (
    ChurchRepository,
    EventRepository,
    UserRepository,
)
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import ensure_app_timezone

logger = logging.getLogger(__name__)


def list_events(
    session: Session,
    *,
    priest_id: int | None = None,
    church_id: int | None = None,
) -> Sequence[Event]:
    """Return events in start-time order.

    ``priest_id`` takes precedence over ``church_id`` when both are given.
    """

    repository = EventRepository(session)
    if priest_id is not None:
        return repository.list(entity_type=EventEntityType.PRIEST, entity_id=priest_id)
    if church_id is not None:
        return repository.list(entity_type=EventEntityType.CHURCH, entity_id=church_id)
    return repository.list()


def list_priest_events(session: Session, priest_id: int) -> Sequence[Event]:
    return list_events(session, priest_id=priest_id)


def list_church_events(session: Session, church_id: int) -> Sequence[Event]:
    return list_events(session, church_id=church_id)


def get_event(session: Session, event_id: int) -> Event:
    event = EventRepository(session).get(event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event


def create_event(
    session: Session,
    *,
    entity_type: str,
    entity_id: int,
    title: str,
    start_time: datetime,
    end_time: datetime | None = None,
    description: str | None = None,
    visibility: str | None = None,
    created_by: int | None = None,
) -> Event:
    owner_type = EventEntityType.parse(entity_type)
    event_visibility = (
        EventVisibility.parse(visibility) if visibility else EventVisibility.PUBLIC
    )
    if not title or not title.strip():
        raise ValidationError("title is required")
    _check_time_range(start_time, end_time)

    with unit_of_work(session):
        _ensure_owner_exists(session, owner_type, entity_id)
        if created_by is not None and UserRepository(session).get(created_by) is None:
            raise NotFoundError("User not found")
        event = EventRepository(session).create(
            Event(
                id=None,
                entity_type=owner_type,
                entity_id=entity_id,
                title=title.strip(),
                description=description,
                start_time=start_time,
                end_time=end_time,
                visibility=event_visibility,
                created_by=created_by,
            )
        )

    logger.info(
        "Event %s created for %s %s", event.id, owner_type.value, entity_id
    )
    return event


def update_event(
    session: Session,
    event_id: int,
    *,
    title: str | None = None,
    description: str | None = None,
    start_time: datetime | None = None,
    end_time: datetime | None = None,
    visibility: str | None = None,
) -> Event:
    """Update the given fields of an event; the owner cannot change."""

    if all(
        value is None
        for value in (title, description, start_time, end_time, visibility)
    ):
        raise ValidationError("No fields to update")
    if title is not None and not title.strip():
        raise ValidationError("title cannot be empty")
    new_visibility = EventVisibility.parse(visibility) if visibility else None

    repository = EventRepository(session)
    with unit_of_work(session):
        current = repository.get(event_id)
        if current is None:
            raise NotFoundError("Event not found")
        updated = replace(
            current,
            title=title.strip() if title is not None else current.title,
            description=description if description is not None else current.description,
            start_time=start_time if start_time is not None else current.start_time,
            end_time=end_time if end_time is not None else current.end_time,
            visibility=new_visibility or current.visibility,
        )
        _check_time_range(updated.start_time, updated.end_time)
        saved = repository.update(updated)
    return saved


def delete_event(session: Session, event_id: int) -> None:
    with unit_of_work(session):
        if not EventRepository(session).delete(event_id):
            raise NotFoundError("Event not found")


def _check_time_range(start_time: datetime, end_time: datetime | None) -> None:
    if end_time is None:
        return
    if ensure_app_timezone(end_time) < ensure_app_timezone(start_time):
        raise ValidationError("end_time cannot be before start_time")


def _ensure_owner_exists(
    session: Session, entity_type: EventEntityType, entity_id: int
) -> None:
    if entity_type is EventEntityType.CHURCH:
        if ChurchRepository(session).get(entity_id) is None:
            raise NotFoundError("Church not found")
        return
    priest = UserRepository(session).get(entity_id)
    if priest is None:
        raise NotFoundError("Priest not found")
    if not priest.is_priest():
        raise ValidationError("User is not a priest")


__all__ = [
    "create_event",
    "delete_event",
    "get_event",
    "list_church_events",
    "list_events",
    "list_priest_events",
    "update_event",
]
