"""Routes for service bookings."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.bookings import (
    create_booking as create_booking_uc,
    get_booking as get_booking_uc,
    list_bookings as list_bookings_uc,
    update_booking_status as update_booking_status_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    BookingCreate,
    BookingRead,
    BookingStatusUpdate,
    DataResponse,
)

router = APIRouter(
    prefix="/bookings", tags=["bookings"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[BookingRead]])
def list_bookings(db: Session = Depends(get_db)):
    """Return every booking with service, church and people names, newest first."""

    return DataResponse(
        data=[BookingRead.from_entity(booking) for booking in list_bookings_uc(db)]
    )


@router.get("/{booking_id}", response_model=DataResponse[BookingRead])
def read_booking(booking_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=BookingRead.from_entity(get_booking_uc(db, booking_id)))


@router.post(
    "", response_model=DataResponse[BookingRead], status_code=status.HTTP_201_CREATED
)
def create_booking(booking_in: BookingCreate, db: Session = Depends(get_db)):
    booking = create_booking_uc(db, **booking_in.model_dump())
    return DataResponse(
        message="Booking created successfully", data=BookingRead.from_entity(booking)
    )


@router.patch("/{booking_id}/status", response_model=DataResponse[BookingRead])
def update_booking_status(
    booking_id: int, payload: BookingStatusUpdate, db: Session = Depends(get_db)
):
    booking = update_booking_status_uc(db, booking_id, payload.status)
    return DataResponse(
        message="Booking status updated", data=BookingRead.from_entity(booking)
    )
