"""
Tests for the trip report boundary.

Covers:
- Report wiring: totals -> sharing -> validation -> customer stats
- Warnings/errors and over-allocation are logged, not raised
"""

import logging
from decimal import Decimal

from junket.schemas.records import BuyInOutRecord, RollingRecord, TripExpense
from junket.schemas.trip import TripAgent
from junket.services.trip_report import build_trip_report
from junket.services.validation import BUY_IN_WITHOUT_ROLLING, NEGATIVE_BUY_IN

LOGGER_NAME = "junket.services.trip_report"


def _trip_rows():
    rolling = [
        RollingRecord(customer_id="c1", rolling_amount=60000, win_loss=-7000, commission_earned=600, trip_id="t1"),
        RollingRecord(customer_id="c2", rolling_amount=40000, win_loss=-3000, commission_earned=400, trip_id="t1"),
        RollingRecord(customer_id="c3", rolling_amount=1, win_loss=-1, trip_id="other"),
    ]
    cash = [
        BuyInOutRecord(customer_id="c1", transaction_type="buy-in", amount=10000, trip_id="t1"),
        BuyInOutRecord(customer_id="c2", transaction_type="buy-in", amount=5000, trip_id="t1"),
        BuyInOutRecord(customer_id="c1", transaction_type="buy-out", amount=3000, trip_id="t1"),
    ]
    expenses = [TripExpense(category="hotel", amount=500)]
    return rolling, cash, expenses


class TestBuildTripReport:
    def test_end_to_end(self):
        rolling, cash, expenses = _trip_rows()
        agents = [
            TripAgent(agent_id="a1", agent_name="Alice", share_percentage=60),
            TripAgent(agent_id="a2", agent_name="Bob", share_percentage=20),
        ]

        report = build_trip_report(agents, rolling, cash, expenses, trip_id="t1")

        assert report.trip_id == "t1"
        assert report.totals.total_win_loss == Decimal("-10000")
        assert report.totals.total_rolling_commission == Decimal("1000")
        assert report.sharing.net_result == Decimal("8500")
        assert report.sharing.total_agent_share == Decimal("6800")
        assert report.sharing.company_share == Decimal("1700")
        assert report.sharing.net_cash_flow == Decimal("-12000")
        assert [a.calculated_share for a in report.sharing.agent_breakdown] == [
            Decimal("5100"),
            Decimal("1700"),
        ]
        assert report.is_valid
        assert [c.customer_id for c in report.customers] == ["c1", "c2"]

    def test_clean_trip_logs_no_warnings(self, caplog):
        rolling, cash, expenses = _trip_rows()
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            build_trip_report([{"sharePercentage": 50}], rolling, cash, expenses, trip_id="t1")
        assert caplog.records == []

    def test_validation_problems_logged(self, caplog):
        cash = [BuyInOutRecord(customer_id="c1", transaction_type="buy-in", amount=1000)]
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            report = build_trip_report([], buy_in_out_records=cash, trip_id="t9")

        assert report.is_valid
        assert BUY_IN_WITHOUT_ROLLING in report.validation.warnings
        messages = [r.getMessage() for r in caplog.records]
        assert any(BUY_IN_WITHOUT_ROLLING in m for m in messages)

    def test_invalid_figures_reported_not_raised(self, caplog):
        rolling = [RollingRecord(customer_id="c1", rolling_amount=10, buy_in_amount=-50)]
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            report = build_trip_report([], rolling)

        assert not report.is_valid
        assert report.validation.errors == [NEGATIVE_BUY_IN]
        assert any("invalid" in r.getMessage() for r in caplog.records)

    def test_over_allocation_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            report = build_trip_report([{"sharePercentage": 80}, {"sharePercentage": 30}])

        assert report.sharing.company_share_percentage == Decimal("-10")
        assert any("110" in r.getMessage() for r in caplog.records)

    def test_injected_logger(self, caplog):
        custom = logging.getLogger("host.trips")
        cash = [BuyInOutRecord(customer_id="c1", transaction_type="buy-in", amount=1000)]
        with caplog.at_level(logging.WARNING, logger="host.trips"):
            build_trip_report([], buy_in_out_records=cash, log=custom)
        assert caplog.records
        assert all(r.name == "host.trips" for r in caplog.records)
