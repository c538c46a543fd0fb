"""Persistence layer for calendar events."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Event, EventEntityType, EventVisibility
from app.infrastructure.models import EventModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class EventRepository:
    """Provide CRUD operations for :class:`Event` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        entity_type: EventEntityType | None = None,
        entity_id: int | None = None,
    ) -> Sequence[Event]:
        """Return events in start-time order, optionally for one owner."""

        query = self.session.query(EventModel)
        if entity_type is not None:
            query = query.filter(EventModel.entity_type == entity_type.value)
        if entity_id is not None:
            query = query.filter(EventModel.entity_id == entity_id)
        query = query.order_by(EventModel.start_time, EventModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel(
            entity_type=event.entity_type.value,
            entity_id=event.entity_id,
            created_by=event.created_by,
        )
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id)
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, event_id: int) -> bool:
        deleted = (
            self.session.query(EventModel)
            .filter(EventModel.id == event_id)
            .delete(synchronize_session=False)
        )
        return deleted > 0

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.title = event.title
        model.description = event.description
        model.start_time = ensure_app_naive_datetime(event.start_time)
        model.end_time = ensure_app_naive_datetime(event.end_time)
        model.visibility = event.visibility.value

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            entity_type=EventEntityType(model.entity_type),
            entity_id=model.entity_id,
            title=model.title,
            description=model.description,
            start_time=ensure_app_timezone(model.start_time),
            end_time=ensure_app_timezone(model.end_time),
            visibility=EventVisibility(model.visibility),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["EventRepository"]
