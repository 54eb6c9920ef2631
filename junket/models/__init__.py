"""
Domain enumerations for the junket core.

All enums are exported here for convenient imports:
    from junket.models import UserRole, TripStatus, etc.
"""

from junket.models.trip import ExpenseCategory, TransactionType, TripStatus
from junket.models.user import UserRole

__all__ = [
    # User
    "UserRole",
    # Trip
    "ExpenseCategory",
    "TransactionType",
    "TripStatus",
]
