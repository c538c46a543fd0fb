"""Exception hierarchy shared by the use cases and the HTTP layer.

``ChurchManagementError``
├── ``ValidationError``      → 400, the caller sent something unusable
│   └── ``InvalidTargetError``
├── ``AuthenticationError``  → 401, bad credentials or token
├── ``NotFoundError``        → 404, a referenced row does not exist
└── ``StorageError``         → 500, the database rejected a statement
"""

from __future__ import annotations


class ChurchManagementError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ChurchManagementError):
    """Missing or malformed input."""

    status_code = 400


class InvalidTargetError(ValidationError):
    """A notification target type outside the supported set."""

    def __init__(self, target_type: object = None) -> None:
        super().__init__("Invalid target type")
        self.target_type = target_type


class AuthenticationError(ChurchManagementError):
    status_code = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class NotFoundError(ChurchManagementError):
    """The requested entity is absent."""

    status_code = 404


class StorageError(ChurchManagementError):
    """Wraps a failure raised by the database driver."""

    status_code = 500


__all__ = [
    "AuthenticationError",
    "ChurchManagementError",
    "ValidationError",
    "InvalidTargetError",
    "NotFoundError",
    "StorageError",
]
