"""Domain entities for calendar events owned by a church or a priest."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.exceptions import ValidationError

from .choices import Choice


class EventEntityType(Choice):
    CHURCH = "CHURCH"
    PRIEST = "PRIEST"

    @classmethod
    def invalid(cls, value: object) -> ValidationError:
        return ValidationError("Invalid entity type")


class EventVisibility(Choice):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

    @classmethod
    def invalid(cls, value: object) -> ValidationError:
        return ValidationError("Invalid visibility")


@dataclass
class Event:
    """An event on the calendar of ``entity_type``/``entity_id``."""

    id: int | None
    entity_type: EventEntityType
    entity_id: int
    title: str
    start_time: datetime
    end_time: datetime | None = None
    description: str | None = None
    visibility: EventVisibility = EventVisibility.PUBLIC
    created_by: int | None = None
    created_at: datetime | None = None


__all__ = ["Event", "EventEntityType", "EventVisibility"]
