"""Use cases for church services."""

from .manage_services import (
    create_service,
    delete_service,
    get_service,
    list_church_services,
    list_services,
    update_service,
)

__all__ = [
    "create_service",
    "delete_service",
    "get_service",
    "list_church_services",
    "list_services",
    "update_service",
]
