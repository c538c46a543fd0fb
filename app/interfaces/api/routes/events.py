"""Routes for church and priest calendars."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.events import (
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_church_events as list_church_events_uc,
    list_events as list_events_uc,
    list_priest_events as list_priest_events_uc,
    update_event as update_event_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    DataResponse,
    EventCreate,
    EventRead,
    EventUpdate,
    MessageResponse,
)

router = APIRouter(
    prefix="/events", tags=["events"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[EventRead]])
def list_events(
    priest_id: int | None = Query(default=None),
    church_id: int | None = Query(default=None),
    db: Session = Depends(get_db),
):
    events = list_events_uc(db, priest_id=priest_id, church_id=church_id)
    return DataResponse(data=[EventRead.from_entity(event) for event in events])


@router.get("/priest/{priest_id}", response_model=DataResponse[list[EventRead]])
def list_priest_events(priest_id: int, db: Session = Depends(get_db)):
    events = list_priest_events_uc(db, priest_id)
    return DataResponse(data=[EventRead.from_entity(event) for event in events])


@router.get("/church/{church_id}", response_model=DataResponse[list[EventRead]])
def list_church_events(church_id: int, db: Session = Depends(get_db)):
    events = list_church_events_uc(db, church_id)
    return DataResponse(data=[EventRead.from_entity(event) for event in events])


@router.get("/{event_id}", response_model=DataResponse[EventRead])
def read_event(event_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=EventRead.from_entity(get_event_uc(db, event_id)))


@router.post(
    "", response_model=DataResponse[EventRead], status_code=status.HTTP_201_CREATED
)
def create_event(event_in: EventCreate, db: Session = Depends(get_db)):
    event = create_event_uc(db, **event_in.model_dump())
    return DataResponse(
        message="Event created successfully", data=EventRead.from_entity(event)
    )


@router.put("/{event_id}", response_model=DataResponse[EventRead])
def update_event(event_id: int, event_in: EventUpdate, db: Session = Depends(get_db)):
    event = update_event_uc(db, event_id, **event_in.model_dump(exclude_unset=True))
    return DataResponse(
        message="Event updated successfully", data=EventRead.from_entity(event)
    )


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    delete_event_uc(db, event_id)
    return MessageResponse(message="Event deleted successfully")
