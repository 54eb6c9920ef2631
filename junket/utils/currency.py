"""
Currency display helpers.

Trip amounts are recorded in the trip's base currency. Converting and
formatting them for the viewer is a display concern; the sharing engine
never calls into this module.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

from pydantic import BaseModel, Field

from junket.config import get_settings
from junket.utils.numbers import ZERO, Number, to_decimal

ONE = Decimal("1")
CENT = Decimal("0.01")

SUPPORTED_CURRENCIES: Dict[str, Dict[str, str]] = {
    "PESO": {"label": "Philippine Peso (₱)", "symbol": "₱"},
    "HKD": {"label": "Hong Kong Dollar (HK$)", "symbol": "HK$"},
    "MYR": {"label": "Malaysian Ringgit (RM)", "symbol": "RM"},
}
DEFAULT_SYMBOL = "HK$"


class ExchangeRates(BaseModel):
    """Per-trip rates from the base currency to each display currency."""

    currency: Optional[str] = Field(
        None,
        description="Trip base currency; settings.base_currency when unset",
    )
    peso: Decimal = ONE
    hkd: Decimal = ONE
    myr: Decimal = ONE

    def rate_for(self, currency: str) -> Decimal:
        if currency not in SUPPORTED_CURRENCIES:
            return ONE
        # Zero rate means "not configured"
        return getattr(self, currency.lower()) or ONE

    def updated(
        self, currency: Optional[str] = None, **rates: Optional[Number]
    ) -> "ExchangeRates":
        """Copy with a new base currency and rates; falsy rates keep the current one."""
        changes: Dict[str, object] = {
            name: to_decimal(value)
            for name, value in rates.items()
            if name in type(self).model_fields and value
        }
        if currency:
            changes["currency"] = currency
        return self.model_copy(update=changes)


def get_currency_symbol(currency: str) -> str:
    info = SUPPORTED_CURRENCIES.get(currency)
    return info["symbol"] if info else DEFAULT_SYMBOL


def convert_amount(
    amount: Optional[Number],
    to_currency: str,
    rates: Optional[ExchangeRates] = None,
    base_currency: Optional[str] = None,
) -> Decimal:
    """
    Convert an amount from the trip's base currency for display.

    Args:
        amount: Amount in base currency (None counts as zero)
        to_currency: Display currency code (PESO, HKD, MYR)
        rates: Trip exchange rates; all 1 if not given
        base_currency: Defaults to rates.currency, then settings.base_currency
    """
    value = to_decimal(amount)
    if value == ZERO:
        return ZERO

    base = (
        base_currency
        or (rates.currency if rates is not None else None)
        or get_settings().base_currency
    )
    if to_currency == base:
        return value

    return value * (rates or ExchangeRates()).rate_for(to_currency)


def _format(amount: Decimal, currency: str) -> str:
    # Half-cents round away from zero
    cents = abs(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{get_currency_symbol(currency)}{cents:,.2f}"


def format_currency(
    amount: Optional[Number],
    currency: Optional[str] = None,
    rates: Optional[ExchangeRates] = None,
    base_currency: Optional[str] = None,
) -> str:
    """
    Symbol plus absolute amount, e.g. HK$1,234.50.

    Conversion only happens when rates are given.
    """
    currency = currency or get_settings().base_currency
    value = to_decimal(amount)
    if rates is not None:
        value = convert_amount(value, currency, rates, base_currency)
    return _format(value, currency)


def format_currency_with_sign(
    amount: Optional[Number],
    currency: Optional[str] = None,
    rates: Optional[ExchangeRates] = None,
    base_currency: Optional[str] = None,
) -> str:
    """Like format_currency but negative amounts get a leading minus."""
    currency = currency or get_settings().base_currency
    value = to_decimal(amount)
    if rates is not None:
        value = convert_amount(value, currency, rates, base_currency)
    sign = "-" if value < ZERO else ""
    return f"{sign}{_format(value, currency)}"
