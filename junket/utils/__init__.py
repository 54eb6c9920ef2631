"""Utility functions."""

from junket.utils.currency import (
    ExchangeRates,
    convert_amount,
    format_currency,
    format_currency_with_sign,
    get_currency_symbol,
)
from junket.utils.log import setup_logging
from junket.utils.numbers import to_decimal

__all__ = [
    "to_decimal",
    "setup_logging",
    "ExchangeRates",
    "convert_amount",
    "format_currency",
    "format_currency_with_sign",
    "get_currency_symbol",
]
