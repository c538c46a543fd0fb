"""ORM models used by the application infrastructure."""

from .booking import BookingModel
from .complaint import ComplaintModel
from .event import EventModel
from .notification import NotificationModel, NotificationRecipientModel
from .organization import ChurchModel, DioceseModel, ForaneModel
from .role import RoleModel
from .service import ServiceModel, ServiceSplitModel
from .transaction import TransactionModel
from .user import UserModel

__all__ = [
    "BookingModel",
    "ChurchModel",
    "ComplaintModel",
    "DioceseModel",
    "EventModel",
    "ForaneModel",
    "NotificationModel",
    "NotificationRecipientModel",
    "RoleModel",
    "ServiceModel",
    "ServiceSplitModel",
    "TransactionModel",
    "UserModel",
]
