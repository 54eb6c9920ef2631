"""
Trip-related enumerations.
"""

from enum import Enum


class TripStatus(str, Enum):
    """Lifecycle of a trip."""
    PLANNED = "planned"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class TransactionType(str, Enum):
    """Direction of a cash/chip movement recorded by staff."""
    BUY_IN = "buy-in"      # Cash converted into table credit
    BUY_OUT = "buy-out"    # Table credit converted back to cash

    @classmethod
    def _missing_(cls, value):
        # Older records use "cash-out" for buy-out
        if value == "cash-out":
            return cls.BUY_OUT
        return None


class ExpenseCategory(str, Enum):
    """Trip expense categories."""
    FLIGHT = "flight"
    HOTEL = "hotel"
    ENTERTAINMENT = "entertainment"
    MEAL = "meal"
    OTHER = "other"
