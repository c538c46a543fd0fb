from .auth import AuthResponse, LoginRequest, RegisterRequest, ResetPasswordRequest
from .booking import BookingCreate, BookingRead, BookingStatusUpdate
from .church import ChurchCreate, ChurchRead, ChurchUpdate
from .common import (
    ERROR_RESPONSES,
    DataResponse,
    ErrorResponse,
    MessageResponse,
    paise_to_rupees,
)
from .complaint import ComplaintCreate, ComplaintRead, ComplaintStatusUpdate
from .event import EventCreate, EventRead, EventUpdate
from .notification import (
    DeliveryRecordRead,
    NotificationCreate,
    NotificationCreateResponse,
    NotificationDeliveredRequest,
    NotificationRead,
)
from .service import (
    ServiceCreate,
    ServiceRead,
    ServiceUpdate,
    SplitIn,
    SplitRead,
    SplitShareRead,
)
from .transaction import TransactionCreate, TransactionRead, TransactionStatusUpdate
from .user import UserCreate, UserRead, UserUpdate

__all__ = [
    "AuthResponse",
    "BookingCreate",
    "BookingRead",
    "BookingStatusUpdate",
    "ChurchCreate",
    "ChurchRead",
    "ChurchUpdate",
    "ComplaintCreate",
    "ComplaintRead",
    "ComplaintStatusUpdate",
    "DataResponse",
    "DeliveryRecordRead",
    "ERROR_RESPONSES",
    "ErrorResponse",
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "LoginRequest",
    "MessageResponse",
    "NotificationCreate",
    "NotificationCreateResponse",
    "NotificationDeliveredRequest",
    "NotificationRead",
    "RegisterRequest",
    "ResetPasswordRequest",
    "ServiceCreate",
    "ServiceRead",
    "ServiceUpdate",
    "SplitIn",
    "SplitRead",
    "SplitShareRead",
    "TransactionCreate",
    "TransactionRead",
    "TransactionStatusUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
    "paise_to_rupees",
]
