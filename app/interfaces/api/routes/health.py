"""Liveness endpoint that also checks the database connection."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.infrastructure.database import get_db
from app.interfaces.api.schemas import MessageResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=MessageResponse)
def health(db: Session = Depends(get_db)):
    """Run ``SELECT 1``; a failure is reported as a 500 by the error handlers."""

    db.execute(text("SELECT 1"))
    return MessageResponse(message="Database connection OK")
