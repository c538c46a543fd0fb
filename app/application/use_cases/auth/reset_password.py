"""Use case for password reset requests."""

import logging

from sqlalchemy.orm import Session

from app.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)

PASSWORD_RESET_MESSAGE = "If an account exists, a reset link will be sent"


def request_password_reset(session: Session, email: str) -> str:
    """Acknowledge a reset request without revealing whether ``email`` exists."""

    user = UserRepository(session).get_by_email(email)
    if user is not None and user.is_active:
        logger.info("Password reset requested for user %s", user.id)
    else:
        logger.info("Password reset requested for unknown or inactive email")
    return PASSWORD_RESET_MESSAGE
