"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.unit_of_work import unit_of_work


def delete_user(session: Session, user_id: int) -> None:
    """Delete the specified user from the system.

    Users that sent or received notifications, or appear on bookings,
    payments, complaints or events, are kept for history; deactivate them
    instead.
    """

    repository = UserRepository(session)
    with unit_of_work(session):
        if repository.get(user_id) is None:
            raise NotFoundError("User not found")
        if repository.is_referenced(user_id):
            raise ValidationError(
                "User has related records and cannot be deleted; deactivate it instead"
            )
        repository.delete(user_id)
