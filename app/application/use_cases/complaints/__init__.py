"""Use cases for complaints."""

from .manage_complaints import (
    create_complaint,
    get_complaint,
    list_complaints,
    list_user_complaints,
    update_complaint_status,
)

__all__ = [
    "create_complaint",
    "get_complaint",
    "list_complaints",
    "list_user_complaints",
    "update_complaint_status",
]
