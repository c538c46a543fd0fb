"""Use case for creating users."""

from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import (
    ChurchRepository,
    RoleRepository,
    UserRepository,
)
from app.infrastructure.security import get_password_hash
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import now_in_app_timezone


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_id: int,
    church_id: int | None = None,
    phone: str | None = None,
    birthday: date | None = None,
    ordination_date: date | None = None,
    feast_date: date | None = None,
    motto: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    with unit_of_work(session):
        if repository.get_by_email(email):
            raise ValidationError("User with this email already exists")

        role = RoleRepository(session).get(role_id)
        if role is None:
            raise NotFoundError("Role not found")

        if church_id is not None and ChurchRepository(session).get(church_id) is None:
            raise NotFoundError("Church not found")

        user = User(
            id=None,
            role=role,
            church_id=church_id,
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            phone=phone,
            birthday=birthday,
            ordination_date=ordination_date,
            feast_date=feast_date,
            motto=motto,
            is_active=True,
            created_at=now_in_app_timezone(),
        )
        created = repository.create(user)

    return created
