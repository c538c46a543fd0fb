"""Repository implementations for infrastructure layer."""

from .booking_repository import BookingRepository
from .church_repository import ChurchRepository, ForaneRepository
from .complaint_repository import ComplaintRepository
from .event_repository import EventRepository
from .notification_repository import NotificationRepository
from .role_repository import RoleRepository
from .service_repository import ServiceRepository
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = [
    "BookingRepository",
    "ChurchRepository",
    "ComplaintRepository",
    "EventRepository",
    "ForaneRepository",
    "NotificationRepository",
    "RoleRepository",
    "ServiceRepository",
    "TransactionRepository",
    "UserRepository",
]
