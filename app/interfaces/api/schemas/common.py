"""Response envelopes shared by every endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Successful response carrying ``data``."""

    success: bool = True
    message: str | None = None
    data: T


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Body returned with every 4xx/5xx status."""

    success: bool = False
    error: str


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def paise_to_rupees(amount_paise: int) -> float:
    return amount_paise / 100


__all__ = [
    "DataResponse",
    "ERROR_RESPONSES",
    "ErrorResponse",
    "MessageResponse",
    "paise_to_rupees",
]
