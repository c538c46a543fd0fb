"""Calendar event schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import Event


class EventCreate(BaseModel):
    entity_type: str = Field(..., description="CHURCH or PRIEST")
    entity_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=150)
    description: str | None = None
    start_time: datetime
    end_time: datetime | None = None
    visibility: str | None = Field(default=None, description="PUBLIC or PRIVATE")
    created_by: int | None = None


class EventUpdate(BaseModel):
    title: str | None = Field(default=None, max_length=150)
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    visibility: str | None = None

    model_config = ConfigDict(extra="forbid")


class EventRead(BaseModel):
    id: int
    entity_type: str
    entity_id: int
    title: str
    description: str | None
    start_time: datetime
    end_time: datetime | None
    visibility: str
    created_by: int | None
    created_at: datetime | None

    @classmethod
    def from_entity(cls, event: Event) -> "EventRead":
        return cls(
            id=event.id or 0,
            entity_type=event.entity_type.value,
            entity_id=event.entity_id,
            title=event.title,
            description=event.description,
            start_time=event.start_time,
            end_time=event.end_time,
            visibility=event.visibility.value,
            created_by=event.created_by,
            created_at=event.created_at,
        )
