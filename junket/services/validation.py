"""
Sanity checks on aggregated trip figures.

Reports problems, never fixes them. Errors mark the figures as unusable
(the caller may block a save); warnings flag data that is merely odd.
"""

from decimal import Decimal
from typing import List, Optional

from junket.config import get_settings
from junket.schemas.validation import FinancialValidationResult
from junket.utils.numbers import ZERO, Number, to_decimal

NEGATIVE_BUY_IN = "Total buy-in cannot be negative"
NEGATIVE_BUY_OUT = "Total buy-out cannot be negative"
NEGATIVE_ROLLING = "Total rolling amount is negative - this is unusual"
DISPROPORTIONATE_CASH_FLOW = "Net cash flow seems disproportionate to win/loss amounts"
BUY_IN_WITHOUT_ROLLING = "Customers bought in but no rolling activity recorded"
ROLLING_WITHOUT_BUY_IN = "Rolling activity recorded but no buy-in amounts"


def validate_trip_financials(
    total_buy_in: Number,
    total_buy_out: Number,
    total_win_loss: Number,
    total_rolling: Number,
    cash_flow_ratio: Optional[Number] = None,
) -> FinancialValidationResult:
    """Check a trip's totals for impossible or suspicious values.

    Args:
        total_buy_in: Sum of customer buy-ins
        total_buy_out: Sum of customer buy-outs
        total_win_loss: Customers' combined win/loss
        total_rolling: Sum of rolling amounts (volume, not commission)
        cash_flow_ratio: Override for settings.cash_flow_warning_ratio

    Returns:
        FinancialValidationResult; is_valid is False only when errors exist.

    Raises:
        ValueError: If cash_flow_ratio is zero or negative
    """
    buy_in = to_decimal(total_buy_in)
    buy_out = to_decimal(total_buy_out)
    win_loss = to_decimal(total_win_loss)
    rolling = to_decimal(total_rolling)
    ratio: Decimal = (
        get_settings().cash_flow_warning_ratio
        if cash_flow_ratio is None
        else to_decimal(cash_flow_ratio)
    )
    if ratio <= ZERO:
        raise ValueError(f"cash_flow_ratio must be positive, got {ratio}")

    warnings: List[str] = []
    errors: List[str] = []

    if buy_in < ZERO:
        errors.append(NEGATIVE_BUY_IN)
    if buy_out < ZERO:
        errors.append(NEGATIVE_BUY_OUT)
    if rolling < ZERO:
        warnings.append(NEGATIVE_ROLLING)

    net_cash_flow = buy_out - buy_in
    if abs(net_cash_flow) > abs(win_loss) * ratio:
        warnings.append(DISPROPORTIONATE_CASH_FLOW)

    if buy_in > ZERO and rolling == ZERO:
        warnings.append(BUY_IN_WITHOUT_ROLLING)

    if rolling > ZERO and buy_in == ZERO:
        warnings.append(ROLLING_WITHOUT_BUY_IN)

    return FinancialValidationResult(
        is_valid=not errors,
        warnings=warnings,
        errors=errors,
    )
