"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import date, datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing a member, priest or administrator."""

    id: int | None
    role: Role
    church_id: int | None
    name: str
    email: str
    password_hash: str
    phone: str | None = None
    birthday: date | None = None
    ordination_date: date | None = None
    feast_date: date | None = None
    motto: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    church_name: str | None = None

    def is_priest(self) -> bool:
        """Return ``True`` when the user holds the priest role."""

        return self.role.is_priest()
