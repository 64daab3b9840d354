"""Exact rational amounts tagged with a commodity."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import total_ordering

from ledgerlite.domain.errors import CommodityMismatchError
from ledgerlite.domain.models.commodity import Commodity
from ledgerlite.utils.decimal_utils import (
    coerce_fraction,
    fraction_to_decimal,
    round_half_up,
)


@total_ordering
@dataclass(frozen=True)
class Amount:
    """Immutable quantity of a single commodity.

    Arithmetic between amounts of different commodities raises
    CommodityMismatchError; Balance is the type that mixes commodities.
    """

    value: Fraction
    commodity: Commodity

    def __post_init__(self) -> None:
        if not isinstance(self.value, Fraction):
            object.__setattr__(self, "value", coerce_fraction(self.value))

    @classmethod
    def zero(cls, commodity: Commodity) -> Amount:
        return cls(Fraction(0), commodity)

    @property
    def symbol(self) -> str:
        return self.commodity.symbol

    def _require_same_commodity(self, other: Amount, operation: str) -> None:
        if self.commodity.symbol != other.commodity.symbol:
            raise CommodityMismatchError(
                operation,
                self.commodity.symbol,
                other.commodity.symbol,
            )

    def __add__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_commodity(other, "add")
        return Amount(self.value + other.value, self.commodity)

    def __sub__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_commodity(other, "subtract")
        return Amount(self.value - other.value, self.commodity)

    def __neg__(self) -> Amount:
        return Amount(-self.value, self.commodity)

    def __abs__(self) -> Amount:
        return Amount(abs(self.value), self.commodity)

    def __mul__(self, factor) -> Amount:
        if isinstance(factor, Amount):
            return NotImplemented
        return Amount(self.value * coerce_fraction(factor), self.commodity)

    __rmul__ = __mul__

    def __truediv__(self, divisor) -> Amount:
        if isinstance(divisor, Amount):
            return NotImplemented
        divisor = coerce_fraction(divisor)
        if divisor == 0:
            raise ZeroDivisionError("division by zero")
        return Amount(self.value / divisor, self.commodity)

    def __lt__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_commodity(other, "compare")
        return self.value < other.value

    def is_zero(self) -> bool:
        return self.value == 0

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def convert_to(self, target: Commodity, rate) -> Amount:
        """Return this amount expressed in ``target`` at ``rate`` per unit."""
        return Amount(self.value * coerce_fraction(rate), target)

    def round_to_precision(self) -> Amount:
        """Round to the commodity's display precision, halves away from zero."""
        return Amount(
            round_half_up(self.value, self.commodity.precision),
            self.commodity,
        )

    def to_decimal(self, places: int | None = None) -> Decimal:
        if places is None:
            places = self.commodity.precision
        return fraction_to_decimal(self.value, places)

    def format(self, show_commodity: bool = True) -> str:
        """Render the amount the way it would be written in a journal.

        Args:
            show_commodity: Include the commodity symbol.

        Returns:
            str: ``$10.00``, ``-$5.25``, ``10.00 GBP`` or the bare number.
        """
        number = self.commodity.format_number(abs(self.value))
        negative = round_half_up(self.value, self.commodity.precision) < 0
        sign = "-" if negative else ""
        if not show_commodity or not self.commodity.symbol:
            return f"{sign}{number}"
        if self.commodity.is_prefix:
            return f"{sign}{self.commodity.display_symbol}{number}"
        return f"{sign}{number} {self.commodity.display_symbol}"

    def __str__(self) -> str:
        return self.format()


__all__ = ["Amount"]
