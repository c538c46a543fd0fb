"""Use case for checking login credentials."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password

logger = logging.getLogger(__name__)


def authenticate_user(session: Session, email: str, password: str) -> User:
    """Return the active user owning ``email`` when ``password`` matches.

    Unknown emails, wrong passwords and deactivated accounts all fail with the
    same error so callers cannot tell them apart.
    """

    user = UserRepository(session).get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError()
    if not user.is_active:
        logger.info("Login refused for inactive user %s", user.id)
        raise AuthenticationError()
    return user
