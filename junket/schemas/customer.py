"""Customer position schemas."""

from decimal import Decimal
from typing import Optional

from junket.schemas.base import CamelModel
from junket.utils.numbers import ZERO


class CustomerNetPosition(CamelModel):
    """Customer's net position; computed on demand, never stored."""

    net_cash_flow: Decimal          # buy-out - buy-in
    net_gaming_result: Decimal      # win/loss - rolling commission
    total_net_position: Decimal


class CustomerTripStats(CamelModel):
    """One customer's aggregated activity within a single trip."""

    customer_id: str
    customer_name: Optional[str] = None
    total_buy_in: Decimal = ZERO
    total_buy_out: Decimal = ZERO
    total_win_loss: Decimal = ZERO
    rolling_amount: Decimal = ZERO
    commission_earned: Decimal = ZERO
    net_cash_flow: Decimal = ZERO
    net_result: Decimal = ZERO      # win/loss after commission
