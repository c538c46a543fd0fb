"""Domain entities exposed by the application."""

from .booking import Booking, BookingStatus
from .choices import Choice
from .complaint import Complaint, ComplaintStatus
from .event import Event, EventEntityType, EventVisibility
from .notification import (
    DeliveryRecord,
    DeliveryStatus,
    Notification,
    NotificationEntry,
    NotificationFanout,
    TargetType,
)
from .organization import Church, Diocese, Forane
from .role import PRIEST_ROLE, Role
from .service import (
    BeneficiaryType,
    Service,
    ServiceSplit,
    SplitShare,
    compute_split_shares,
    validate_splits,
)
from .transaction import PaymentMethod, Transaction, TransactionStatus
from .user import User

__all__ = [
    "BeneficiaryType",
    "Booking",
    "BookingStatus",
    "Choice",
    "Church",
    "Complaint",
    "ComplaintStatus",
    "DeliveryRecord",
    "DeliveryStatus",
    "Diocese",
    "Event",
    "EventEntityType",
    "EventVisibility",
    "Forane",
    "Notification",
    "NotificationEntry",
    "NotificationFanout",
    "PRIEST_ROLE",
    "PaymentMethod",
    "Role",
    "Service",
    "ServiceSplit",
    "SplitShare",
    "TargetType",
    "Transaction",
    "TransactionStatus",
    "User",
    "compute_split_shares",
    "validate_splits",
]
