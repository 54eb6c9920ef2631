"""Pydantic schemas for calculation inputs and outputs."""

from junket.schemas.base import CamelModel
from junket.schemas.customer import CustomerNetPosition, CustomerTripStats
from junket.schemas.permissions import UIPermissions
from junket.schemas.records import BuyInOutRecord, RollingRecord, TripExpense
from junket.schemas.trip import TripAgent, TripSharing, TripTotals
from junket.schemas.validation import FinancialValidationResult

__all__ = [
    # Base
    "CamelModel",
    # Trip
    "TripAgent",
    "TripSharing",
    "TripTotals",
    # Customer
    "CustomerNetPosition",
    "CustomerTripStats",
    # Records
    "BuyInOutRecord",
    "RollingRecord",
    "TripExpense",
    # Validation
    "FinancialValidationResult",
    # Permissions
    "UIPermissions",
]
