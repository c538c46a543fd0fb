"""Persistence layer for the church hierarchy."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Church, Forane
from app.infrastructure.models import ChurchModel, ForaneModel


class ChurchRepository:
    """Provide CRUD operations for :class:`Church` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Church]:
        query = self.session.query(ChurchModel).order_by(ChurchModel.name, ChurchModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, church_id: int) -> Church | None:
        model = self.session.get(ChurchModel, church_id)
        return self._to_entity(model) if model else None

    def create(self, church: Church) -> Church:
        model = ChurchModel(forane_id=church.forane_id)
        self._apply_entity_to_model(model, church)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, church: Church) -> Church:
        model = self.session.get(ChurchModel, church.id)
        if model is None:
            msg = f"Church with id {church.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, church)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, church_id: int) -> bool:
        deleted = (
            self.session.query(ChurchModel)
            .filter(ChurchModel.id == church_id)
            .delete(synchronize_session=False)
        )
        return deleted > 0

    @staticmethod
    def _apply_entity_to_model(model: ChurchModel, church: Church) -> None:
        model.name = church.name
        model.address = church.address
        model.phone = church.phone
        model.bank_account = church.bank_account
        model.qr_code_url = church.qr_code_url

    @staticmethod
    def _to_entity(model: ChurchModel) -> Church:
        forane = model.forane
        return Church(
            id=model.id,
            forane_id=model.forane_id,
            name=model.name,
            address=model.address,
            phone=model.phone,
            bank_account=model.bank_account,
            qr_code_url=model.qr_code_url,
            forane_name=forane.name if forane is not None else None,
            diocese_name=(
                forane.diocese.name
                if forane is not None and forane.diocese is not None
                else None
            ),
        )


class ForaneRepository:
    """Read access to foranes."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, forane_id: int) -> Forane | None:
        model = self.session.get(ForaneModel, forane_id)
        if model is None:
            return None
        return Forane(id=model.id, diocese_id=model.diocese_id, name=model.name)


__all__ = ["ChurchRepository", "ForaneRepository"]
