"""
Trip sharing schemas.

TripAgent is an input record with one derived field (calculated_share).
TripSharing and TripTotals are pure outputs: regenerate them whenever any
contributing input changes instead of storing them.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field, computed_field, field_validator

from junket.schemas.base import CamelModel
from junket.utils.numbers import ZERO, to_decimal


class TripAgent(CamelModel):
    """One agent's participation in a trip."""

    model_config = ConfigDict(extra="allow")

    agent_id: Optional[str] = None
    agent_name: Optional[str] = None
    share_percentage: Decimal = Field(
        default=ZERO,
        description="Percent (0-100) of house final profit owed to this agent",
    )
    # Derived; always overwritten by calculate_trip_sharing
    calculated_share: Decimal = ZERO

    @field_validator("share_percentage", "calculated_share", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        return to_decimal(v)


class TripTotals(CamelModel):
    """Aggregated financial inputs for one trip."""

    total_win_loss: Decimal = ZERO  # Customer perspective: negative = house won
    total_expenses: Decimal = ZERO
    total_rolling: Decimal = ZERO
    total_rolling_commission: Decimal = ZERO
    total_buy_in: Decimal = ZERO
    total_buy_out: Decimal = ZERO


class TripSharing(CamelModel):
    """
    Profit-sharing breakdown for one trip.

    agent_share_percentage + company_share_percentage is always 100;
    company_share_percentage goes negative when agents are over-allocated.
    """

    # Pass-through inputs
    total_win_loss: Decimal
    total_expenses: Decimal
    total_rolling_commission: Decimal
    total_buy_in: Decimal
    total_buy_out: Decimal

    # Derived
    net_cash_flow: Decimal
    house_gross_win: Decimal
    house_net_win: Decimal
    net_result: Decimal = Field(..., description="House final profit")
    total_agent_share: Decimal
    company_share: Decimal
    agent_share_percentage: Decimal
    company_share_percentage: Decimal
    agent_breakdown: List[TripAgent] = Field(default_factory=list)

    @computed_field
    @property
    def house_final_profit(self) -> Decimal:
        return self.net_result
