"""Use case for updating user information."""

from dataclasses import replace
from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import ChurchRepository, UserRepository
from app.infrastructure.unit_of_work import unit_of_work

_UNSET = object()


def update_user(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    church_id: int | None | object = _UNSET,
    birthday: date | None = None,
    ordination_date: date | None = None,
    feast_date: date | None = None,
    motto: str | None = None,
) -> User:
    """Update the provided user with the new values.

    ``church_id`` may be passed as ``None`` to detach the user from its church;
    every other ``None`` keeps the current value.
    """

    repository = UserRepository(session)

    with unit_of_work(session):
        current_user = repository.get(user_id)
        if current_user is None:
            raise NotFoundError("User not found")

        new_email = current_user.email
        if email is not None and email.lower() != current_user.email.lower():
            existing_with_email = repository.get_by_email(email)
            if existing_with_email and existing_with_email.id != user_id:
                raise ValidationError("User with this email already exists")
            new_email = email

        new_church_id = current_user.church_id
        if church_id is not _UNSET:
            if church_id is not None and ChurchRepository(session).get(church_id) is None:
                raise NotFoundError("Church not found")
            new_church_id = church_id

        updated_user = replace(
            current_user,
            name=name if name is not None else current_user.name,
            email=new_email,
            phone=phone if phone is not None else current_user.phone,
            church_id=new_church_id,
            birthday=birthday if birthday is not None else current_user.birthday,
            ordination_date=(
                ordination_date
                if ordination_date is not None
                else current_user.ordination_date
            ),
            feast_date=feast_date if feast_date is not None else current_user.feast_date,
            motto=motto if motto is not None else current_user.motto,
        )
        saved = repository.update(updated_user)

    return saved
