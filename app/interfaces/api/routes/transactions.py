"""Routes for payment transactions and their review queue."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.transactions import (
    create_transaction as create_transaction_uc,
    get_transaction as get_transaction_uc,
    list_church_transactions as list_church_transactions_uc,
    list_pending_reviews as list_pending_reviews_uc,
    list_transactions as list_transactions_uc,
    update_transaction_status as update_transaction_status_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    DataResponse,
    TransactionCreate,
    TransactionRead,
    TransactionStatusUpdate,
)

router = APIRouter(
    prefix="/transactions", tags=["transactions"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[TransactionRead]])
def list_transactions(
    church_id: int | None = Query(default=None),
    method: str | None = Query(default=None),
    status_filter: str | None = Query(default=None, alias="status"),
    start_date: datetime | None = Query(default=None),
    end_date: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
):
    """Return transactions matching every given filter, newest first."""

    transactions = list_transactions_uc(
        db,
        church_id=church_id,
        method=method,
        status=status_filter,
        start=start_date,
        end=end_date,
    )
    return DataResponse(data=[TransactionRead.from_entity(t) for t in transactions])


@router.get("/pending-reviews", response_model=DataResponse[list[TransactionRead]])
def list_pending_reviews(
    church_id: int | None = Query(default=None), db: Session = Depends(get_db)
):
    """Return uploaded payment proofs waiting for a manual check."""

    transactions = list_pending_reviews_uc(db, church_id=church_id)
    return DataResponse(data=[TransactionRead.from_entity(t) for t in transactions])


@router.get("/church/{church_id}", response_model=DataResponse[list[TransactionRead]])
def list_church_transactions(church_id: int, db: Session = Depends(get_db)):
    transactions = list_church_transactions_uc(db, church_id)
    return DataResponse(data=[TransactionRead.from_entity(t) for t in transactions])


@router.get("/{transaction_id}", response_model=DataResponse[TransactionRead])
def read_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Return a transaction with its amount split per beneficiary."""

    transaction = get_transaction_uc(db, transaction_id)
    return DataResponse(data=TransactionRead.from_entity(transaction))


@router.post(
    "",
    response_model=DataResponse[TransactionRead],
    status_code=status.HTTP_201_CREATED,
)
def create_transaction(payload: TransactionCreate, db: Session = Depends(get_db)):
    transaction = create_transaction_uc(db, **payload.model_dump())
    return DataResponse(
        message="Transaction recorded successfully",
        data=TransactionRead.from_entity(transaction),
    )


@router.patch("/{transaction_id}/status", response_model=DataResponse[TransactionRead])
def update_transaction_status(
    transaction_id: int,
    payload: TransactionStatusUpdate,
    db: Session = Depends(get_db),
):
    transaction = update_transaction_status_uc(db, transaction_id, payload.status)
    return DataResponse(
        message="Transaction status updated",
        data=TransactionRead.from_entity(transaction),
    )
