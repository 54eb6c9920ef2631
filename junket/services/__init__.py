"""Financial calculation services."""

from junket.services.aggregation import (
    calculate_customer_trip_stats,
    calculate_trip_totals,
    summarize_customers,
)
from junket.services.sharing import (
    calculate_customer_net_position,
    calculate_trip_sharing,
    calculate_trip_sharing_legacy,
)
from junket.services.trip_report import TripReport, build_trip_report
from junket.services.validation import validate_trip_financials

__all__ = [
    "calculate_trip_sharing",
    "calculate_trip_sharing_legacy",
    "calculate_customer_net_position",
    "validate_trip_financials",
    "calculate_customer_trip_stats",
    "calculate_trip_totals",
    "summarize_customers",
    "TripReport",
    "build_trip_report",
]
