"""Church schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ChurchCreate(BaseModel):
    forane_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=120)
    address: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    bank_account: str | None = Field(default=None, max_length=50)
    qr_code_url: str | None = Field(default=None, max_length=255)


class ChurchUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    address: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    bank_account: str | None = Field(default=None, max_length=50)
    qr_code_url: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class ChurchRead(BaseModel):
    id: int
    forane_id: int
    name: str
    address: str | None
    phone: str | None
    bank_account: str | None
    qr_code_url: str | None
    forane_name: str | None
    diocese_name: str | None

    model_config = ConfigDict(from_attributes=True)
