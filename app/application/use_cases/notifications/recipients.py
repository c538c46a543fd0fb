"""Resolve a notification target to the users it reaches."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import PRIEST_ROLE, TargetType
from app.domain.exceptions import InvalidTargetError, ValidationError
from app.infrastructure.repositories import UserRepository


def resolve_recipients(
    session: Session, target_type: TargetType | str, target_id: int | None = None
) -> set[int]:
    """Return the ids of every user addressed by ``(target_type, target_id)``.

    ``USER`` is returned as given, without checking the user exists.
    ``PRIEST`` and ``ALL`` ignore ``target_id``. The hierarchy is read as it is
    now; nothing is cached between calls.
    """

    target = TargetType.parse(target_type)
    users = UserRepository(session)

    if target is TargetType.USER:
        return {_require_target_id(target, target_id)}
    if target is TargetType.PRIEST:
        return users.list_ids_by_role_name(PRIEST_ROLE)
    if target is TargetType.CHURCH:
        return users.list_ids_by_church(_require_target_id(target, target_id))
    if target is TargetType.FORANE:
        return users.list_ids_by_forane(_require_target_id(target, target_id))
    if target is TargetType.DIOCESE:
        return users.list_ids_by_diocese(_require_target_id(target, target_id))
    if target is TargetType.ALL:
        return users.list_active_ids()
    raise InvalidTargetError(target)


def _require_target_id(target: TargetType, target_id: int | None) -> int:
    if target_id is None:
        raise ValidationError(f"target_id is required for target type {target.value}")
    return target_id


__all__ = ["resolve_recipients"]
