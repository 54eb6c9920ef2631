"""
Trip report: aggregate the raw rows, split the profit, check the numbers.

This is the boundary the view layer calls. The calculation modules it
uses stay silent; anything worth telling an operator is logged here.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from junket.schemas.customer import CustomerTripStats
from junket.schemas.records import BuyInOutRecord, RollingRecord, TripExpense
from junket.schemas.trip import TripSharing, TripTotals
from junket.schemas.validation import FinancialValidationResult
from junket.services.aggregation import calculate_trip_totals, summarize_customers
from junket.services.sharing import AgentLike, calculate_trip_sharing
from junket.services.validation import validate_trip_financials
from junket.utils.numbers import HUNDRED

logger = logging.getLogger(__name__)


@dataclass
class TripReport:
    """Everything the trip screen shows, computed in one pass."""

    totals: TripTotals
    sharing: TripSharing
    validation: FinancialValidationResult
    customers: List[CustomerTripStats] = field(default_factory=list)
    trip_id: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid


def build_trip_report(
    agents: Iterable[AgentLike],
    rolling_records: Iterable[RollingRecord] = (),
    buy_in_out_records: Iterable[BuyInOutRecord] = (),
    expenses: Iterable[TripExpense] = (),
    trip_id: Optional[str] = None,
    log: Optional[logging.Logger] = None,
) -> TripReport:
    """
    Compute totals, sharing and validation for one trip.

    Args:
        agents: Trip agents with their share percentages
        rolling_records: Rolling sheets recorded by staff
        buy_in_out_records: Cage buy-in/buy-out rows
        expenses: Trip expenses
        trip_id: Skip rows tagged with another trip
        log: Logger to report through (module logger by default)

    Returns:
        TripReport. Invalid figures are reported, not raised.
    """
    log = log or logger
    rolling = list(rolling_records)
    cash = list(buy_in_out_records)

    totals = calculate_trip_totals(rolling, cash, expenses, trip_id=trip_id)
    log.debug(f"Trip {trip_id or '-'} totals: {totals.model_dump()}")

    sharing = calculate_trip_sharing(
        totals.total_win_loss,
        totals.total_expenses,
        totals.total_rolling_commission,
        agents,
        totals.total_buy_in,
        totals.total_buy_out,
    )

    if sharing.agent_share_percentage > HUNDRED:
        log.warning(
            f"Trip {trip_id or '-'}: agents allotted "
            f"{sharing.agent_share_percentage}% of profit, "
            f"company share is {sharing.company_share_percentage}%"
        )

    validation = validate_trip_financials(
        totals.total_buy_in,
        totals.total_buy_out,
        totals.total_win_loss,
        totals.total_rolling,
    )
    for error in validation.errors:
        log.warning(f"Trip {trip_id or '-'} invalid: {error}")
    for warning in validation.warnings:
        log.warning(f"Trip {trip_id or '-'}: {warning}")

    return TripReport(
        totals=totals,
        sharing=sharing,
        validation=validation,
        customers=summarize_customers(rolling, cash, trip_id=trip_id),
        trip_id=trip_id,
    )
