"""Domain entities for complaints raised by users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .choices import Choice


class ComplaintStatus(Choice):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


@dataclass
class Complaint:
    id: int | None
    user_id: int
    title: str
    body: str
    status: ComplaintStatus = ComplaintStatus.OPEN
    booking_id: int | None = None
    created_at: datetime | None = None
    complainant: str | None = None


__all__ = ["Complaint", "ComplaintStatus"]
