"""Result formatting: fixed decimals with trailing zeros trimmed."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from . import config
from .types import NonFiniteResultError

# Wide enough for any finite double written out in fixed point
_FIXED_POINT_CONTEXT = Context(prec=400)


def format_value(value: float, decimals: int | None = None) -> str:
    """Format a number with at most ``decimals`` fractional digits.

    The exact binary value is rounded to ``decimals`` places
    (OUTPUT_DECIMALS by default), ties away from zero, then a trailing
    decimal point and trailing zeros are removed.

    Args:
        value: Number to format
        decimals: Fractional digits to round to

    Returns:
        Formatted string (e.g., 2.0 -> "2", 2.5 -> "2.5", 1/512 -> "0.00195313")

    Raises:
        NonFiniteResultError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise NonFiniteResultError(f"Result is not a finite number: {value}")
    if decimals is None:
        decimals = config.OUTPUT_DECIMALS
    step = Decimal(1).scaleb(-int(decimals))
    rounded = Decimal(value).quantize(
        step, rounding=ROUND_HALF_UP, context=_FIXED_POINT_CONTEXT
    )
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Tiny negatives round to "-0"
    if text == "-0":
        text = "0"
    return text


def format_result(value: float, unit: str | None = None) -> str:
    """Format a value and append the unit, if any, after one space."""
    text = format_value(value)
    if unit:
        return f"{text} {unit}"
    return text
