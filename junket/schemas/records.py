"""
Staff-recorded input rows.

These mirror what the data-access layer reads from its tables; the core
only sums them.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from junket.models.trip import ExpenseCategory, TransactionType
from junket.schemas.base import CamelModel
from junket.utils.numbers import ZERO


class RollingRecord(CamelModel):
    """A gaming session's rolling volume and result for one customer."""

    customer_id: str
    customer_name: Optional[str] = None
    agent_id: Optional[str] = None
    staff_id: Optional[str] = None
    trip_id: Optional[str] = None

    rolling_amount: Decimal = ZERO
    win_loss: Decimal = Field(
        default=ZERO,
        description="Customer perspective: negative = customer lost",
    )
    commission_rate: Optional[Decimal] = Field(
        None,
        description="Percent of rolling paid back as commission",
    )
    commission_earned: Optional[Decimal] = None
    buy_in_amount: Optional[Decimal] = None
    buy_out_amount: Optional[Decimal] = None

    verified: bool = False


class BuyInOutRecord(CamelModel):
    """A single buy-in or buy-out at the cage/table."""

    customer_id: str
    customer_name: Optional[str] = None
    staff_id: Optional[str] = None
    trip_id: Optional[str] = None
    transaction_type: TransactionType
    amount: Decimal

    @field_validator("transaction_type", mode="before")
    @classmethod
    def accept_legacy_type(cls, v):
        # TransactionType maps the old "cash-out" spelling
        if isinstance(v, str):
            return TransactionType(v)
        return v


class TripExpense(CamelModel):
    """An operating cost charged against a trip."""

    id: Optional[str] = None
    category: ExpenseCategory = ExpenseCategory.OTHER
    description: str = ""
    amount: Decimal = ZERO
