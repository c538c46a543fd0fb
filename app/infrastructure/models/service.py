"""SQLAlchemy models for church services and their revenue splits."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ServiceSplitModel(Base):
    """Percentage of a service's amount owed to one beneficiary type."""

    __tablename__ = "service_split"
    __table_args__ = (UniqueConstraint("service_id", "beneficiary_type"),)

    id = Column(Integer, primary_key=True, index=True)
    service_id = Column(
        Integer, ForeignKey("service.id", ondelete="CASCADE"), nullable=False, index=True
    )
    beneficiary_type = Column(String(20), nullable=False)
    percentage = Column(Numeric(5, 2), nullable=False)


class ServiceModel(Base):
    """Database representation of a bookable service."""

    __tablename__ = "service"

    id = Column(Integer, primary_key=True, index=True)
    church_id = Column(Integer, ForeignKey("church.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    amount_paise = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    church = relationship("ChurchModel", lazy="joined")
    splits = relationship(
        ServiceSplitModel,
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=[ServiceSplitModel.percentage.desc(), ServiceSplitModel.id],
    )


__all__ = ["ServiceModel", "ServiceSplitModel"]
