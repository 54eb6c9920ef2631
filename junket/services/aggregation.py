"""
Roll staff-recorded rows up into trip and per-customer totals.

Every trip is calculated independently: when a trip_id is given, rows
tagged with a different trip are skipped. Rows without a trip_id are
assumed to belong to the trip being summarised.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from junket.models.trip import TransactionType
from junket.schemas.customer import CustomerTripStats
from junket.schemas.records import BuyInOutRecord, RollingRecord, TripExpense
from junket.schemas.trip import TripTotals
from junket.utils.numbers import HUNDRED, ZERO


def _in_trip(record, trip_id: Optional[str]) -> bool:
    return trip_id is None or not record.trip_id or record.trip_id == trip_id


def commission_for(record: RollingRecord) -> Decimal:
    """
    Commission paid to the customer for one rolling record.

    The recorded commission_earned wins; otherwise it is derived from
    rolling_amount and commission_rate (a percentage).
    """
    if record.commission_earned is not None:
        return record.commission_earned
    if record.commission_rate is not None:
        return record.rolling_amount * record.commission_rate / HUNDRED
    return ZERO


def _cash_totals(
    rolling_records: Sequence[RollingRecord],
    buy_in_out_records: Sequence[BuyInOutRecord],
) -> Tuple[Decimal, Decimal]:
    buy_in = ZERO
    buy_out = ZERO

    for record in buy_in_out_records:
        if record.transaction_type == TransactionType.BUY_IN:
            buy_in += record.amount
        else:
            buy_out += record.amount

    # Some sessions carry their own buy-in/out on the rolling sheet
    for record in rolling_records:
        buy_in += record.buy_in_amount or ZERO
        buy_out += record.buy_out_amount or ZERO

    return buy_in, buy_out


def calculate_customer_trip_stats(
    customer_id: str,
    rolling_records: Iterable[RollingRecord],
    buy_in_out_records: Iterable[BuyInOutRecord] = (),
    trip_id: Optional[str] = None,
) -> CustomerTripStats:
    """Totals for one customer within one trip."""
    rolling = [
        r for r in rolling_records
        if r.customer_id == customer_id and _in_trip(r, trip_id)
    ]
    cash = [
        r for r in buy_in_out_records
        if r.customer_id == customer_id and _in_trip(r, trip_id)
    ]

    buy_in, buy_out = _cash_totals(rolling, cash)
    win_loss = sum((r.win_loss for r in rolling), ZERO)
    commission = sum((commission_for(r) for r in rolling), ZERO)

    customer_name = next(
        (r.customer_name for r in [*rolling, *cash] if r.customer_name),
        None,
    )

    return CustomerTripStats(
        customer_id=customer_id,
        customer_name=customer_name,
        total_buy_in=buy_in,
        total_buy_out=buy_out,
        total_win_loss=win_loss,
        rolling_amount=sum((r.rolling_amount for r in rolling), ZERO),
        commission_earned=commission,
        net_cash_flow=buy_out - buy_in,
        net_result=win_loss - commission,
    )


def summarize_customers(
    rolling_records: Iterable[RollingRecord],
    buy_in_out_records: Iterable[BuyInOutRecord] = (),
    trip_id: Optional[str] = None,
) -> List[CustomerTripStats]:
    """One CustomerTripStats per customer, in the order customers first appear."""
    rolling = list(rolling_records)
    cash = list(buy_in_out_records)

    seen: Dict[str, None] = {}
    for record in [*rolling, *cash]:
        if _in_trip(record, trip_id):
            seen.setdefault(record.customer_id, None)

    return [
        calculate_customer_trip_stats(customer_id, rolling, cash, trip_id)
        for customer_id in seen
    ]


def total_expenses(expenses: Iterable[TripExpense]) -> Decimal:
    return sum((expense.amount for expense in expenses), ZERO)


def calculate_trip_totals(
    rolling_records: Iterable[RollingRecord] = (),
    buy_in_out_records: Iterable[BuyInOutRecord] = (),
    expenses: Iterable[TripExpense] = (),
    trip_id: Optional[str] = None,
) -> TripTotals:
    """Everything calculate_trip_sharing and validate_trip_financials need."""
    rolling = [r for r in rolling_records if _in_trip(r, trip_id)]
    cash = [r for r in buy_in_out_records if _in_trip(r, trip_id)]

    buy_in, buy_out = _cash_totals(rolling, cash)

    return TripTotals(
        total_win_loss=sum((r.win_loss for r in rolling), ZERO),
        total_expenses=total_expenses(expenses),
        total_rolling=sum((r.rolling_amount for r in rolling), ZERO),
        total_rolling_commission=sum((commission_for(r) for r in rolling), ZERO),
        total_buy_in=buy_in,
        total_buy_out=buy_out,
    )
