"""Routes for the services churches offer."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.services import (
    create_service as create_service_uc,
    delete_service as delete_service_uc,
    get_service as get_service_uc,
    list_services as list_services_uc,
    update_service as update_service_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    DataResponse,
    MessageResponse,
    ServiceCreate,
    ServiceRead,
    ServiceUpdate,
)

router = APIRouter(
    prefix="/services", tags=["services"], responses=ERROR_RESPONSES
)


@router.get("", response_model=DataResponse[list[ServiceRead]])
def list_services(db: Session = Depends(get_db)):
    return DataResponse(
        data=[ServiceRead.from_entity(service) for service in list_services_uc(db)]
    )


@router.get("/{service_id}", response_model=DataResponse[ServiceRead])
def read_service(service_id: int, db: Session = Depends(get_db)):
    """Return a service with its split configuration."""

    return DataResponse(data=ServiceRead.from_entity(get_service_uc(db, service_id)))


@router.post(
    "", response_model=DataResponse[ServiceRead], status_code=status.HTTP_201_CREATED
)
def create_service(service_in: ServiceCreate, db: Session = Depends(get_db)):
    service = create_service_uc(
        db,
        church_id=service_in.church_id,
        name=service_in.name,
        description=service_in.description,
        amount_paise=service_in.amount_paise,
        splits=[split.as_pair() for split in service_in.splits],
    )
    return DataResponse(
        message="Service created successfully", data=ServiceRead.from_entity(service)
    )


@router.put("/{service_id}", response_model=DataResponse[ServiceRead])
def update_service(
    service_id: int, service_in: ServiceUpdate, db: Session = Depends(get_db)
):
    splits = (
        [split.as_pair() for split in service_in.splits]
        if service_in.splits is not None
        else None
    )
    service = update_service_uc(
        db,
        service_id,
        name=service_in.name,
        description=service_in.description,
        amount_paise=service_in.amount_paise,
        splits=splits,
    )
    return DataResponse(
        message="Service updated successfully", data=ServiceRead.from_entity(service)
    )


@router.delete("/{service_id}", response_model=MessageResponse)
def delete_service(service_id: int, db: Session = Depends(get_db)):
    delete_service_uc(db, service_id)
    return MessageResponse(message="Service deleted successfully")
