"""SQLAlchemy model for calendar events."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from app.domain.entities import EventVisibility
from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class EventModel(Base):
    """``entity_id`` points at a church or a user depending on ``entity_type``."""

    __tablename__ = "event"
    __table_args__ = (Index("ix_event_entity", "entity_type", "entity_id"),)

    id = Column(Integer, primary_key=True, index=True)
    entity_type = Column(String(20), nullable=False)
    entity_id = Column(Integer, nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=True)
    visibility = Column(
        String(20),
        nullable=False,
        default=EventVisibility.PUBLIC.value,
        server_default=EventVisibility.PUBLIC.value,
    )
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["EventModel"]
