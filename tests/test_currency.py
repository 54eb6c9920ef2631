"""Tests for currency display helpers."""

from decimal import Decimal

from junket.utils.currency import (
    ExchangeRates,
    convert_amount,
    format_currency,
    format_currency_with_sign,
    get_currency_symbol,
)


class TestSymbols:
    def test_known(self):
        assert get_currency_symbol("PESO") == "₱"
        assert get_currency_symbol("HKD") == "HK$"
        assert get_currency_symbol("MYR") == "RM"

    def test_unknown_falls_back_to_hkd(self):
        assert get_currency_symbol("USD") == "HK$"


class TestConvertAmount:
    def test_zero_and_none(self):
        rates = ExchangeRates(myr=Decimal("0.6"))
        assert convert_amount(0, "MYR", rates) == 0
        assert convert_amount(None, "MYR", rates) == 0

    def test_same_as_base(self):
        rates = ExchangeRates(hkd=Decimal("9"))
        assert convert_amount(100, "HKD", rates) == Decimal("100")

    def test_applies_target_rate(self):
        rates = ExchangeRates(peso=Decimal("7.2"))
        assert convert_amount(1000, "PESO", rates) == Decimal("7200.0")

    def test_zero_rate_means_unset(self):
        rates = ExchangeRates(myr=Decimal("0"))
        assert convert_amount(50, "MYR", rates) == Decimal("50")

    def test_unsupported_currency_rate_one(self):
        assert convert_amount(50, "USD", ExchangeRates()) == Decimal("50")

    def test_base_currency_from_settings(self, monkeypatch):
        monkeypatch.setenv("BASE_CURRENCY", "PESO")
        rates = ExchangeRates(peso=Decimal("7"), hkd=Decimal("0.14"))
        assert convert_amount(700, "PESO", rates) == Decimal("700")
        assert convert_amount(700, "HKD", rates) == Decimal("98.00")


class TestFormatting:
    def test_absolute_value(self):
        assert format_currency(-1234.5, "HKD") == "HK$1,234.50"

    def test_with_sign(self):
        assert format_currency_with_sign(-1234.5, "HKD") == "-HK$1,234.50"
        assert format_currency_with_sign(1234.5, "HKD") == "HK$1,234.50"

    def test_none_is_zero(self):
        assert format_currency(None, "MYR") == "RM0.00"

    def test_converts_when_rates_given(self):
        rates = ExchangeRates(myr=Decimal("0.6"))
        assert format_currency(1000, "MYR", rates) == "RM600.00"

    def test_default_currency(self):
        assert format_currency(5) == "HK$5.00"

    def test_half_cents_round_away_from_zero(self):
        assert format_currency(2.125, "HKD") == "HK$2.13"
        assert format_currency(0.005, "HKD") == "HK$0.01"
        assert format_currency(-2.125, "HKD") == "HK$2.13"

    def test_half_cents_with_sign(self):
        assert format_currency_with_sign(-2.125, "HKD") == "-HK$2.13"
        assert format_currency_with_sign(1234.565, "MYR") == "RM1,234.57"


class TestExchangeRates:
    def test_defaults(self):
        rates = ExchangeRates()
        assert (rates.peso, rates.hkd, rates.myr) == (1, 1, 1)

    def test_updated_keeps_falsy(self):
        rates = ExchangeRates(peso=Decimal("7"))
        new = rates.updated(peso=None, myr="0.61", hkd=0)
        assert new.peso == Decimal("7")
        assert new.myr == Decimal("0.61")
        assert new.hkd == Decimal("1")
        assert rates.myr == Decimal("1")

    def test_updated_sets_base_currency(self):
        rates = ExchangeRates(peso=Decimal("7"))
        new = rates.updated("PESO", hkd="0.14")
        assert new.currency == "PESO"
        assert new.peso == Decimal("7")
        assert new.hkd == Decimal("0.14")
        assert rates.currency is None

    def test_updated_without_currency_keeps_it(self):
        rates = ExchangeRates(currency="MYR")
        assert rates.updated(peso="7").currency == "MYR"

    def test_base_currency_from_rates(self):
        rates = ExchangeRates(currency="PESO", hkd=Decimal("0.14"))
        assert convert_amount(700, "PESO", rates) == Decimal("700")
        assert convert_amount(700, "HKD", rates) == Decimal("98.00")
        assert format_currency(700, "HKD", rates) == "HK$98.00"
