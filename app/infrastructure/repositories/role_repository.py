"""Persistence layer for roles data."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.infrastructure.models import RoleModel


class RoleRepository:
    """Provide read access to roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.upper(RoleModel.name) == name.upper())
            .first()
        )
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name)


__all__ = ["RoleRepository"]
