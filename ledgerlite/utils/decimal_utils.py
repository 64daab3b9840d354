"""Helpers for Decimal and Fraction normalization."""

import math
from decimal import Decimal
from fractions import Fraction


def coerce_fraction(value) -> Fraction:
    """Normalize numeric values to an exact Fraction.

    Args:
        value: Int, Decimal, Fraction or numeric string.

    Returns:
        Fraction: Exact rational value.
    """
    if value is None:
        return Fraction(0)
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (int, Decimal)):
        return Fraction(value)
    if isinstance(value, float):
        return Fraction(Decimal(str(value)))
    return Fraction(str(value).strip())


def round_half_up(value: Fraction, places: int) -> Fraction:
    """Round a Fraction to ``places`` decimals, halves away from zero."""
    scale = 10**places
    rounded = math.floor(abs(value) * scale + Fraction(1, 2))
    if value < 0:
        rounded = -rounded
    return Fraction(rounded, scale)


def fraction_to_decimal(value: Fraction, places: int) -> Decimal:
    """Return ``value`` as a Decimal with exactly ``places`` decimals.

    Args:
        value: Exact rational value.
        places: Number of decimal places to keep.

    Returns:
        Decimal: Rounded value carrying ``places`` fractional digits.
    """
    rounded = round_half_up(value, places)
    return Decimal(int(rounded * 10**places)).scaleb(-places)


def format_fraction(
    value: Fraction,
    places: int,
    thousands: bool = False,
) -> str:
    """Render a Fraction with fixed decimals and optional digit grouping."""
    number = fraction_to_decimal(value, places)
    if thousands:
        return f"{number:,f}"
    return f"{number:f}"


__all__ = [
    "coerce_fraction",
    "round_half_up",
    "fraction_to_decimal",
    "format_fraction",
]
