"""Routes to manage users of the church directory."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
    toggle_user_status as toggle_user_status_uc,
    update_user as update_user_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    DataResponse,
    MessageResponse,
    UserCreate,
    UserRead,
    UserUpdate,
)

router = APIRouter(
    prefix="/users", tags=["users"], responses=ERROR_RESPONSES
)
logger = logging.getLogger(__name__)


@router.get("", response_model=DataResponse[list[UserRead]])
def list_users(db: Session = Depends(get_db)):
    """Return every user with role and church names."""

    return DataResponse(data=[UserRead.from_entity(user) for user in list_users_uc(db)])


@router.post(
    "", response_model=DataResponse[UserRead], status_code=status.HTTP_201_CREATED
)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Create a new user; the password is stored hashed."""

    user = create_user_uc(db, **user_in.model_dump())
    logger.info("User %s registered with role %s", user.id, user.role.name)
    return DataResponse(message="User created successfully", data=UserRead.from_entity(user))


@router.get("/{user_id}", response_model=DataResponse[UserRead])
def read_user(user_id: int, db: Session = Depends(get_db)):
    return DataResponse(data=UserRead.from_entity(get_user_uc(db, user_id)))


@router.put("/{user_id}", response_model=DataResponse[UserRead])
def update_user(user_id: int, user_in: UserUpdate, db: Session = Depends(get_db)):
    """Update profile fields; omitted fields keep their value."""

    update_data = user_in.model_dump(exclude_unset=True)
    user = update_user_uc(db, user_id=user_id, **update_data)
    return DataResponse(message="User updated successfully", data=UserRead.from_entity(user))


@router.patch("/{user_id}/toggle-status", response_model=DataResponse[UserRead])
def toggle_user_status(user_id: int, db: Session = Depends(get_db)):
    """Activate an inactive user or deactivate an active one."""

    user = toggle_user_status_uc(db, user_id)
    return DataResponse(
        message="User status updated successfully", data=UserRead.from_entity(user)
    )


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    delete_user_uc(db, user_id)
    return MessageResponse(message="User deleted successfully")
