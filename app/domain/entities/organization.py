"""Domain entities for the diocese → forane → church hierarchy."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Diocese:
    id: int
    name: str


@dataclass
class Forane:
    """A group of neighbouring churches inside a diocese."""

    id: int
    diocese_id: int
    name: str


@dataclass
class Church:
    """A parish church, the unit users are registered under."""

    id: int | None
    forane_id: int
    name: str
    address: str | None = None
    phone: str | None = None
    bank_account: str | None = None
    qr_code_url: str | None = None
    forane_name: str | None = None
    diocese_name: str | None = None


__all__ = ["Church", "Diocese", "Forane"]
