"""Use cases for managing churches."""

from .manage_churches import (
    create_church,
    delete_church,
    get_church,
    list_churches,
    update_church,
)

__all__ = [
    "create_church",
    "delete_church",
    "get_church",
    "list_churches",
    "update_church",
]
