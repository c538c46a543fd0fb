"""Persistence layer for services and their split configuration."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import BeneficiaryType, Service, ServiceSplit
from app.infrastructure.models import ServiceModel, ServiceSplitModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class ServiceRepository:
    """Provide CRUD operations for :class:`Service` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, church_id: int | None = None) -> Sequence[Service]:
        query = self.session.query(ServiceModel)
        if church_id is not None:
            query = query.filter(ServiceModel.church_id == church_id)
        query = query.order_by(ServiceModel.created_at.desc(), ServiceModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, service_id: int) -> Service | None:
        model = self.session.get(ServiceModel, service_id)
        return self._to_entity(model) if model else None

    def create(self, service: Service) -> Service:
        model = ServiceModel(church_id=service.church_id)
        self._apply_entity_to_model(model, service)
        if service.created_at is not None:
            model.created_at = ensure_app_naive_datetime(service.created_at)
        model.splits = [self._split_to_model(split) for split in service.splits]
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, service: Service, *, replace_splits: bool = False) -> Service:
        model = self.session.get(ServiceModel, service.id)
        if model is None:
            msg = f"Service with id {service.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, service)
        if replace_splits:
            model.splits.clear()
            # Flush the removals first so the unique (service, beneficiary)
            # constraint never sees the old and new rows together.
            self.session.flush()
            model.splits.extend(self._split_to_model(split) for split in service.splits)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, service_id: int) -> bool:
        model = self.session.get(ServiceModel, service_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    @staticmethod
    def _apply_entity_to_model(model: ServiceModel, service: Service) -> None:
        model.name = service.name
        model.description = service.description
        model.amount_paise = service.amount_paise

    @staticmethod
    def _split_to_model(split: ServiceSplit) -> ServiceSplitModel:
        return ServiceSplitModel(
            beneficiary_type=split.beneficiary.value, percentage=split.percentage
        )

    @staticmethod
    def _to_entity(model: ServiceModel) -> Service:
        return Service(
            id=model.id,
            church_id=model.church_id,
            name=model.name,
            description=model.description,
            amount_paise=model.amount_paise,
            created_at=ensure_app_timezone(model.created_at),
            church_name=model.church.name if model.church is not None else None,
            splits=[
                ServiceSplit(
                    beneficiary=BeneficiaryType(split.beneficiary_type),
                    percentage=split.percentage,
                )
                for split in model.splits
            ],
        )


__all__ = ["ServiceRepository"]
