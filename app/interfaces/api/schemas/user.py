"""User schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.domain.entities import User


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role_id: int = Field(..., ge=1)
    church_id: int | None = Field(default=None, ge=1)
    phone: str | None = Field(default=None, max_length=20)
    birthday: date | None = None
    ordination_date: date | None = None
    feast_date: date | None = None
    motto: str | None = Field(default=None, max_length=255)


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=20)
    church_id: int | None = None
    birthday: date | None = None
    ordination_date: date | None = None
    feast_date: date | None = None
    motto: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None
    role: str
    church_id: int | None
    church_name: str | None
    birthday: date | None
    ordination_date: date | None
    feast_date: date | None
    motto: str | None
    is_active: bool
    created_at: datetime | None

    @classmethod
    def from_entity(cls, user: User) -> "UserRead":
        return cls(
            id=user.id or 0,
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.name,
            church_id=user.church_id,
            church_name=user.church_name,
            birthday=user.birthday,
            ordination_date=user.ordination_date,
            feast_date=user.feast_date,
            motto=user.motto,
            is_active=user.is_active,
            created_at=user.created_at,
        )
