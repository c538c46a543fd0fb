"""Use cases for payment transactions."""

from .manage_transactions import (
    create_transaction,
    get_transaction,
    list_church_transactions,
    list_pending_reviews,
    list_transactions,
    update_transaction_status,
)

__all__ = [
    "create_transaction",
    "get_transaction",
    "list_church_transactions",
    "list_pending_reviews",
    "list_transactions",
    "update_transaction_status",
]
