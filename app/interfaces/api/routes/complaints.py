"""Routes for member complaints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.complaints import (
    create_complaint as create_complaint_uc,
    get_complaint as get_complaint_uc,
    list_complaints as list_complaints_uc,
    list_user_complaints as list_user_complaints_uc,
    update_complaint_status as update_complaint_status_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    ComplaintCreate,
    ComplaintRead,
    ComplaintStatusUpdate,
    DataResponse,
)

router = APIRouter(
    prefix="/complaints", tags=["complaints"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[ComplaintRead]])
def list_complaints(db: Session = Depends(get_db)):
    complaints = list_complaints_uc(db)
    return DataResponse(data=[ComplaintRead.from_entity(c) for c in complaints])


@router.get("/user/{user_id}", response_model=DataResponse[list[ComplaintRead]])
def list_user_complaints(user_id: int, db: Session = Depends(get_db)):
    complaints = list_user_complaints_uc(db, user_id)
    return DataResponse(data=[ComplaintRead.from_entity(c) for c in complaints])


@router.get("/{complaint_id}", response_model=DataResponse[ComplaintRead])
def read_complaint(complaint_id: int, db: Session = Depends(get_db)):
    complaint = get_complaint_uc(db, complaint_id)
    return DataResponse(data=ComplaintRead.from_entity(complaint))


@router.post(
    "", response_model=DataResponse[ComplaintRead], status_code=status.HTTP_201_CREATED
)
def create_complaint(complaint_in: ComplaintCreate, db: Session = Depends(get_db)):
    complaint = create_complaint_uc(db, **complaint_in.model_dump())
    return DataResponse(
        message="Complaint submitted successfully",
        data=ComplaintRead.from_entity(complaint),
    )


@router.put("/{complaint_id}/status", response_model=DataResponse[ComplaintRead])
def update_complaint_status(
    complaint_id: int,
    payload: ComplaintStatusUpdate,
    db: Session = Depends(get_db),
):
    complaint = update_complaint_status_uc(db, complaint_id, payload.status)
    return DataResponse(
        message="Complaint status updated", data=ComplaintRead.from_entity(complaint)
    )
