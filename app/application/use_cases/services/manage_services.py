"""Use cases for the services a church offers and their revenue splits."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import Decimal, InvalidOperation

import logging

from sqlalchemy.orm import Session

from app.domain.entities import (
    BeneficiaryType,
    Service,
    ServiceSplit,
    validate_splits,
)
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.repositories import ChurchRepository, ServiceRepository
from app.infrastructure.unit_of_work import unit_of_work
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

SplitInput = tuple[object, object]


def list_services(session: Session) -> Sequence[Service]:
    """Return every service, most recently added first."""

    return ServiceRepository(session).list()


def list_church_services(session: Session, church_id: int) -> Sequence[Service]:
    if ChurchRepository(session).get(church_id) is None:
        raise NotFoundError("Church not found")
    return ServiceRepository(session).list(church_id=church_id)


def get_service(session: Session, service_id: int) -> Service:
    service = ServiceRepository(session).get(service_id)
    if service is None:
        raise NotFoundError("Service not found")
    return service


def create_service(
    session: Session,
    *,
    church_id: int,
    name: str,
    amount_paise: int,
    description: str | None = None,
    splits: Iterable[SplitInput] = (),
) -> Service:
    """Register a service and its split configuration in one transaction.

    ``splits`` holds ``(beneficiary_type, percentage)`` pairs.
    """

    if not name or not name.strip():
        raise ValidationError("name is required")
    _require_positive_amount(amount_paise)
    parsed_splits = _parse_splits(splits)

    with unit_of_work(session):
        if ChurchRepository(session).get(church_id) is None:
            raise NotFoundError("Church not found")
        service = ServiceRepository(session).create(
            Service(
                id=None,
                church_id=church_id,
                name=name.strip(),
                description=description,
                amount_paise=amount_paise,
                created_at=now_in_app_timezone(),
                splits=parsed_splits,
            )
        )

    logger.info(
        "Service %s created for church %s with %s split(s)",
        service.id,
        church_id,
        len(service.splits),
    )
    return service


def update_service(
    session: Session,
    service_id: int,
    *,
    name: str | None = None,
    description: str | None = None,
    amount_paise: int | None = None,
    splits: Iterable[SplitInput] | None = None,
) -> Service:
    """Update a service; ``splits`` replaces the whole configuration when given."""

    if name is not None and not name.strip():
        raise ValidationError("name cannot be empty")
    if amount_paise is not None:
        _require_positive_amount(amount_paise)
    parsed_splits = _parse_splits(splits) if splits is not None else None

    repository = ServiceRepository(session)
    with unit_of_work(session):
        current = repository.get(service_id)
        if current is None:
            raise NotFoundError("Service not found")
        updated = repository.update(
            replace(
                current,
                name=name.strip() if name is not None else current.name,
                description=description if description is not None else current.description,
                amount_paise=(
                    amount_paise if amount_paise is not None else current.amount_paise
                ),
                splits=parsed_splits if parsed_splits is not None else current.splits,
            ),
            replace_splits=parsed_splits is not None,
        )
    return updated


def delete_service(session: Session, service_id: int) -> None:
    """Delete a service with its splits. Booked services fail with a storage error."""

    with unit_of_work(session):
        if not ServiceRepository(session).delete(service_id):
            raise NotFoundError("Service not found")


def _require_positive_amount(amount_paise: int) -> None:
    if amount_paise <= 0:
        raise ValidationError("amount_paise must be greater than zero")


def _parse_splits(splits: Iterable[SplitInput]) -> list[ServiceSplit]:
    parsed = []
    for beneficiary, percentage in splits:
        try:
            value = Decimal(str(percentage))
        except InvalidOperation as exc:
            raise ValidationError("Split percentage must be a number") from exc
        parsed.append(
            ServiceSplit(beneficiary=BeneficiaryType.parse(beneficiary), percentage=value)
        )
    validate_splits(parsed)
    return parsed


__all__ = [
    "create_service",
    "delete_service",
    "get_service",
    "list_church_services",
    "list_services",
    "update_service",
]
