"""Use cases for the church directory."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Church
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import ChurchRepository, ForaneRepository
from app.infrastructure.unit_of_work import unit_of_work

logger = logging.getLogger(__name__)


def list_churches(session: Session) -> Sequence[Church]:
    """Return all churches ordered by name, with forane and diocese names."""

    return ChurchRepository(session).list()


def get_church(session: Session, church_id: int) -> Church:
    church = ChurchRepository(session).get(church_id)
    if church is None:
        raise NotFoundError("Church not found")
    return church


def create_church(
    session: Session,
    *,
    forane_id: int,
    name: str,
    address: str | None = None,
    phone: str | None = None,
    bank_account: str | None = None,
    qr_code_url: str | None = None,
) -> Church:
    """Register a church under an existing forane."""

    if not name or not name.strip():
        raise ValidationError("name is required")

    with unit_of_work(session):
        if ForaneRepository(session).get(forane_id) is None:
            raise NotFoundError("Forane not found")
        church = ChurchRepository(session).create(
            Church(
                id=None,
                forane_id=forane_id,
                name=name.strip(),
                address=address,
                phone=phone,
                bank_account=bank_account,
                qr_code_url=qr_code_url,
            )
        )

    logger.info("Church %s created under forane %s", church.id, forane_id)
    return church


def update_church(
    session: Session,
    church_id: int,
    *,
    name: str | None = None,
    address: str | None = None,
    phone: str | None = None,
    bank_account: str | None = None,
    qr_code_url: str | None = None,
) -> Church:
    """Update the contact details of a church; ``None`` keeps a value."""

    repository = ChurchRepository(session)
    with unit_of_work(session):
        current = repository.get(church_id)
        if current is None:
            raise NotFoundError("Church not found")
        if name is not None and not name.strip():
            raise ValidationError("name cannot be empty")
        updated = repository.update(
            replace(
                current,
                name=name.strip() if name is not None else current.name,
                address=address if address is not None else current.address,
                phone=phone if phone is not None else current.phone,
                bank_account=(
                    bank_account if bank_account is not None else current.bank_account
                ),
                qr_code_url=qr_code_url if qr_code_url is not None else current.qr_code_url,
            )
        )
    return updated


def delete_church(session: Session, church_id: int) -> None:
    """Delete a church. Fails with a storage error while users still reference it."""

    with unit_of_work(session):
        if not ChurchRepository(session).delete(church_id):
            raise NotFoundError("Church not found")


__all__ = [
    "create_church",
    "delete_church",
    "get_church",
    "list_churches",
    "update_church",
]
