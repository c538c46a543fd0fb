"""Service and revenue split schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import Service, ServiceSplit, SplitShare

from .common import paise_to_rupees


class SplitIn(BaseModel):
    beneficiary_type: str = Field(..., description="CHURCH, PRIEST, FORANE or DIOCESE")
    percentage: float = Field(..., gt=0, le=100)

    def as_pair(self) -> tuple[str, float]:
        return self.beneficiary_type, self.percentage


class ServiceCreate(BaseModel):
    church_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=120)
    description: str | None = None
    amount_paise: int = Field(..., gt=0)
    splits: list[SplitIn] = Field(default_factory=list)


class ServiceUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    description: str | None = None
    amount_paise: int | None = Field(default=None, gt=0)
    splits: list[SplitIn] | None = Field(
        default=None, description="Replaces every split when provided"
    )

    model_config = ConfigDict(extra="forbid")


class SplitRead(BaseModel):
    beneficiary_type: str
    percentage: float

    @classmethod
    def from_entity(cls, split: ServiceSplit) -> "SplitRead":
        return cls(
            beneficiary_type=split.beneficiary.value, percentage=float(split.percentage)
        )


class SplitShareRead(SplitRead):
    amount_paise: int
    amount_rupees: float

    @classmethod
    def from_entity(cls, share: SplitShare) -> "SplitShareRead":
        return cls(
            beneficiary_type=share.beneficiary.value,
            percentage=float(share.percentage),
            amount_paise=share.amount_paise,
            amount_rupees=paise_to_rupees(share.amount_paise),
        )


class ServiceRead(BaseModel):
    id: int
    church_id: int
    church_name: str | None
    name: str
    description: str | None
    amount_paise: int
    amount_rupees: float
    created_at: datetime | None
    splits: list[SplitRead]

    @classmethod
    def from_entity(cls, service: Service) -> "ServiceRead":
        return cls(
            id=service.id or 0,
            church_id=service.church_id,
            church_name=service.church_name,
            name=service.name,
            description=service.description,
            amount_paise=service.amount_paise,
            amount_rupees=paise_to_rupees(service.amount_paise),
            created_at=service.created_at,
            splits=[SplitRead.from_entity(split) for split in service.splits],
        )
