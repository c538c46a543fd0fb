"""Closed sets of names stored as plain strings in the database."""

from __future__ import annotations

from enum import Enum

from app.domain.exceptions import ValidationError


class Choice(str, Enum):
    """String enum that parses user input case-insensitively."""

    @classmethod
    def parse(cls, value: object):
        """Return the member named ``value`` or raise the type's validation error."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise cls.invalid(value)

    @classmethod
    def invalid(cls, value: object) -> ValidationError:
        return ValidationError("Invalid status")


__all__ = ["Choice"]
