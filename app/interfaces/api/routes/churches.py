"""Routes for the church directory."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.churches import (
    create_church as create_church_uc,
    delete_church as delete_church_uc,
    get_church as get_church_uc,
    list_churches as list_churches_uc,
    update_church as update_church_uc,
)
from app.application.use_cases.services import list_church_services
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    ChurchCreate,
    ChurchRead,
    ChurchUpdate,
    DataResponse,
    MessageResponse,
    ServiceRead,
)

router = APIRouter(
    prefix="/churches", tags=["churches"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[ChurchRead]])
def list_churches(db: Session = Depends(get_db)):
    """Return all churches with their forane and diocese names."""

    churches = list_churches_uc(db)
    return DataResponse(data=[ChurchRead.model_validate(church) for church in churches])


@router.get("/{church_id}", response_model=DataResponse[ChurchRead])
def read_church(church_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=ChurchRead.model_validate(get_church_uc(db, church_id)))


@router.post(
    "", response_model=DataResponse[ChurchRead], status_code=status.HTTP_201_CREATED
)
def create_church(church_in: ChurchCreate, db: Session = Depends(get_db)):
    church = create_church_uc(db, **church_in.model_dump())
    return DataResponse(
        message="Church created successfully", data=ChurchRead.model_validate(church)
    )


@router.put("/{church_id}", response_model=DataResponse[ChurchRead])
def update_church(church_id: int, church_in: ChurchUpdate, db: Session = Depends(get_db)):
    church = update_church_uc(db, church_id, **church_in.model_dump(exclude_unset=True))
    return DataResponse(
        message="Church updated successfully", data=ChurchRead.model_validate(church)
    )


@router.delete("/{church_id}", response_model=MessageResponse)
def delete_church(church_id: int, db: Session = Depends(get_db)):
    delete_church_uc(db, church_id)
    return MessageResponse(message="Church deleted successfully")


@router.get("/{church_id}/services", response_model=DataResponse[list[ServiceRead]])
def list_services_of_church(church_id: int, db: Session = Depends(get_db)):
    """Return the services offered by a church with their splits."""

    services = list_church_services(db, church_id)
    return DataResponse(data=[ServiceRead.from_entity(service) for service in services])
