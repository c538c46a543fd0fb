"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import exists, func, or_
from sqlalchemy.orm import Session

from app.domain.entities import Role, User
from app.infrastructure.models import (
    BookingModel,
    ChurchModel,
    ComplaintModel,
    EventModel,
    ForaneModel,
    NotificationModel,
    NotificationRecipientModel,
    RoleModel,
    TransactionModel,
    UserModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide CRUD operations and directory lookups for users."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(
            UserModel.created_at.desc(), UserModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> bool:
        deleted = (
            self.session.query(UserModel)
            .filter(UserModel.id == user_id)
            .delete(synchronize_session=False)
        )
        return deleted > 0

    def toggle_active(self, user_id: int) -> bool:
        """Flip ``is_active`` in place; returns ``False`` when no row matched."""

        updated = (
            self.session.query(UserModel)
            .filter(UserModel.id == user_id)
            .update(
                {UserModel.is_active: ~UserModel.is_active},
                synchronize_session=False,
            )
        )
        return updated > 0

    def is_referenced(self, user_id: int) -> bool:
        """Return ``True`` when another row still points at the user."""

        references = (
            exists().where(NotificationModel.sender_id == user_id),
            exists().where(NotificationRecipientModel.user_id == user_id),
            exists().where(
                or_(
                    BookingModel.parishioner_id == user_id,
                    BookingModel.priest_id == user_id,
                    BookingModel.created_by == user_id,
                )
            ),
            exists().where(TransactionModel.recorded_by == user_id),
            exists().where(ComplaintModel.user_id == user_id),
            exists().where(EventModel.created_by == user_id),
        )
        return any(self.session.query(clause).scalar() for clause in references)

    # Directory lookups used to resolve notification audiences.

    def list_ids_by_role_name(self, name: str) -> set[int]:
        query = (
            self.session.query(UserModel.id)
            .join(RoleModel, UserModel.role_id == RoleModel.id)
            .filter(func.upper(RoleModel.name) == name.upper())
        )
        return {user_id for (user_id,) in query.all()}

    def list_ids_by_church(self, church_id: int) -> set[int]:
        query = self.session.query(UserModel.id).filter(UserModel.church_id == church_id)
        return {user_id for (user_id,) in query.all()}

    def list_ids_by_forane(self, forane_id: int) -> set[int]:
        query = (
            self.session.query(UserModel.id)
            .join(ChurchModel, UserModel.church_id == ChurchModel.id)
            .filter(ChurchModel.forane_id == forane_id)
        )
        return {user_id for (user_id,) in query.all()}

    def list_ids_by_diocese(self, diocese_id: int) -> set[int]:
        query = (
            self.session.query(UserModel.id)
            .join(ChurchModel, UserModel.church_id == ChurchModel.id)
            .join(ForaneModel, ChurchModel.forane_id == ForaneModel.id)
            .filter(ForaneModel.diocese_id == diocese_id)
        )
        return {user_id for (user_id,) in query.all()}

    def list_active_ids(self) -> set[int]:
        query = self.session.query(UserModel.id).filter(UserModel.is_active.is_(True))
        return {user_id for (user_id,) in query.all()}

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            church_id=model.church_id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            phone=model.phone,
            birthday=model.birthday,
            ordination_date=model.ordination_date,
            feast_date=model.feast_date,
            motto=model.motto,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
            church_name=model.church.name if model.church is not None else None,
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.role_id = user.role.id
        model.church_id = user.church_id
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.phone = user.phone
        model.birthday = user.birthday
        model.ordination_date = user.ordination_date
        model.feast_date = user.feast_date
        model.motto = user.motto
        model.is_active = user.is_active

    @staticmethod
    def _role_to_entity(model_role: RoleModel | None) -> Role:
        if model_role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return Role(id=model_role.id, name=model_role.name)


__all__ = ["UserRepository"]
