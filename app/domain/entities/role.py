"""Domain entity representing a user role."""

from dataclasses import dataclass

PRIEST_ROLE = "PRIEST"


@dataclass
class Role:
    """Named role assigned to every user (``PRIEST``, ``ADMIN``, ...)."""

    id: int
    name: str

    def is_priest(self) -> bool:
        return self.name.upper() == PRIEST_ROLE


__all__ = ["PRIEST_ROLE", "Role"]
