"""Use case for self-registration of members."""

from sqlalchemy.orm import Session

from app.application.use_cases.users import create_user
from app.domain.entities import User
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import ChurchRepository, RoleRepository

DEFAULT_ROLE = "MEMBER"


def register_user(
    session: Session,
    *,
    name: str | None,
    email: str | None,
    password: str | None,
    church_id: int | None,
    phone: str | None = None,
) -> User:
    """Create a ``MEMBER`` account attached to an existing church."""

    if not name or not email or not password:
        raise ValidationError("name, email and password are required")
    if church_id is None:
        raise ValidationError("Church selection is required")
    if ChurchRepository(session).get(church_id) is None:
        raise ValidationError("Selected church does not exist")

    role = RoleRepository(session).get_by_name(DEFAULT_ROLE)
    if role is None:
        raise NotFoundError("Role not found")

    return create_user(
        session,
        name=name,
        email=email,
        password=password,
        role_id=role.id,
        church_id=church_id,
        phone=phone,
    )
