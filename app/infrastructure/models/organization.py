"""SQLAlchemy models for dioceses, foranes and churches."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class DioceseModel(Base):
    __tablename__ = "diocese"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)


class ForaneModel(Base):
    """A forane groups churches and belongs to exactly one diocese."""

    __tablename__ = "forane"

    id = Column(Integer, primary_key=True, index=True)
    diocese_id = Column(Integer, ForeignKey("diocese.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)

    diocese = relationship("DioceseModel", lazy="joined")


class ChurchModel(Base):
    """Database representation of a parish church."""

    __tablename__ = "church"

    id = Column(Integer, primary_key=True, index=True)
    forane_id = Column(Integer, ForeignKey("forane.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    address = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    bank_account = Column(String(50), nullable=True)
    qr_code_url = Column(String(255), nullable=True)

    forane = relationship("ForaneModel", lazy="joined")


__all__ = ["ChurchModel", "DioceseModel", "ForaneModel"]
