"""Endpoints for registration, login and password resets."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.application.use_cases.auth import (
    authenticate_user,
    register_user as register_user_uc,
    request_password_reset,
)
from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import create_access_token, decode_access_token
from app.interfaces.api.schemas import (
    ERROR_RESPONSES,
    AuthResponse,
    DataResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UserRead,
)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={**ERROR_RESPONSES, 401: {"model": ErrorResponse}},
)
logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


def _issue_token(request: Request, user: User) -> AuthResponse:
    token = create_access_token(
        {"sub": str(user.id), "role": user.role.name}, request.app.state.settings
    )
    return AuthResponse(token=token, user=UserRead.from_entity(user))


def get_current_user(
    request: Request,
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the active user named by a bearer token."""

    try:
        payload = decode_access_token(token, request.app.state.settings)
    except ValueError as exc:
        raise AuthenticationError("Invalid token") from exc

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise AuthenticationError("Invalid token")
    user = UserRepository(db).get(int(subject))
    if user is None or not user.is_active:
        raise AuthenticationError("Invalid token")
    return user


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(payload: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    """Create a member account and log it in."""

    user = register_user_uc(db, **payload.model_dump())
    logger.info("User %s registered", user.id)
    return _issue_token(request, user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, request: Request, db: Session = Depends(get_db)):
    user = authenticate_user(db, payload.email, payload.password)
    return _issue_token(request, user)


@router.post("/logout", response_model=MessageResponse)
def logout():
    """Tokens are stateless; clients discard theirs."""

    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=DataResponse[UserRead])
def read_me(current_user: User = Depends(get_current_user)):
    return DataResponse(data=UserRead.from_entity(current_user))


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(payload: ResetPasswordRequest, db: Session = Depends(get_db)):
    return MessageResponse(message=request_password_reset(db, payload.email))
