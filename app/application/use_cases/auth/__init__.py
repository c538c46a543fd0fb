"""Use cases for registration and login."""

from .authenticate_user import authenticate_user
from .register_user import register_user
from .reset_password import PASSWORD_RESET_MESSAGE, request_password_reset

__all__ = [
    "PASSWORD_RESET_MESSAGE",
    "authenticate_user",
    "register_user",
    "request_password_reset",
]
