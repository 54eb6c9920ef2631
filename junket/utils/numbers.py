"""
Numeric coercion at the calculation boundary.

Amounts arrive from the data layer as int, float, str or Decimal.
They are converted once here so the arithmetic only ever sees Decimal.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Optional[Number], default: Decimal = ZERO) -> Decimal:
    """
    Convert a monetary or percentage value to Decimal.

    None becomes `default`. Floats go through str() so 0.1 stays 0.1.

    Raises:
        TypeError: value is not a number (bool counts as not a number)
        ValueError: string is not a finite number
    """
    if value is None:
        return default
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got bool: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        return Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}") from None
    else:
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result
