"""Canonical, locale-independent text for converted values.

Policy (first match wins):
  1. Non-finite values use Python's spelling: 'nan', 'inf', '-inf'
  2. Non-zero |value| < 1e-4 or > 1e5: scientific, 5 decimals ('1.00000e+06')
  3. Within 1e-5 of an integer: integer text ('5')
  4. Otherwise: 5 significant digits, plain decimal, trailing zeros trimmed
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal

from .unittypes import UnitDefinition


SCIENTIFIC_LOWER = 1e-4
SCIENTIFIC_UPPER = 1e5
INTEGER_TOLERANCE = 1e-5
SIGNIFICANT_DIGITS = 5


def format_value(value: float) -> str:
    """Render a converted value for display.

    Examples:
        >>> format_value(5.0)
        '5'
        >>> format_value(1000000.0)
        '1.00000e+06'
        >>> format_value(2.500003)
        '2.5'
        >>> format_value(0.000001)
        '1.00000e-06'
    """
    value = float(value)

    if not math.isfinite(value):
        return str(value)

    magnitude = abs(value)
    if value != 0 and (magnitude < SCIENTIFIC_LOWER or magnitude > SCIENTIFIC_UPPER):
        return f"{value:.5e}"

    nearest = round(value)
    if abs(value - nearest) < INTEGER_TOLERANCE:
        return str(int(nearest))

    return _significant_decimal(value)


def _significant_decimal(value: float) -> str:
    # %g switches to exponent form once rounding carries into a new digit
    # (99999.7 -> '1e+05'), so expand through Decimal to stay plain.
    rounded = float(f"{value:.{SIGNIFICANT_DIGITS}g}")
    text = format(Decimal(repr(rounded)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


@dataclass(frozen=True)
class ConversionResult:
    """A converted value, its unit, and the display text fixed at creation."""

    value: float
    unit: UnitDefinition
    formatted_value: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "formatted_value", format_value(self.value))

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "unit": self.unit.symbol,
            "name": self.unit.name,
            "formatted_value": self.formatted_value,
        }


__all__ = [
    "format_value",
    "ConversionResult",
]
