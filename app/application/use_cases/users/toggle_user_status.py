"""Use case for activating or deactivating a user."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.unit_of_work import unit_of_work

from .get_user import get_user


def toggle_user_status(session: Session, user_id: int) -> User:
    """Flip ``is_active`` for the user and return the updated record.

    Inactive users stop receiving ``ALL`` notifications.
    """

    with unit_of_work(session):
        if not UserRepository(session).toggle_active(user_id):
            raise NotFoundError("User not found")
    return get_user(session, user_id)
