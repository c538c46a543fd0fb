"""Complaint schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities import Complaint


class ComplaintCreate(BaseModel):
    user_id: int = Field(..., ge=1)
    title: str = Field(..., max_length=150)
    body: str
    booking_id: int | None = None


class ComplaintStatusUpdate(BaseModel):
    status: str


class ComplaintRead(BaseModel):
    id: int
    user_id: int
    complainant: str | None
    booking_id: int | None
    title: str
    body: str
    status: str
    created_at: datetime | None

    @classmethod
    def from_entity(cls, complaint: Complaint) -> "ComplaintRead":
        return cls(
            id=complaint.id or 0,
            user_id=complaint.user_id,
            complainant=complaint.complainant,
            booking_id=complaint.booking_id,
            title=complaint.title,
            body=complaint.body,
            status=complaint.status.value,
            created_at=complaint.created_at,
        )
