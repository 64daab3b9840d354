"""Commodities, their display settings and price history."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from fractions import Fraction
from typing import TYPE_CHECKING

from ledgerlite.domain.constants import (
    DEFAULT_COMMODITY_SYMBOL,
    DEFAULT_PRECISION,
    PREFIX_COMMODITY_SYMBOLS,
)
from ledgerlite.utils.decimal_utils import format_fraction

if TYPE_CHECKING:
    from ledgerlite.domain.models.amount import Amount


_FORMAT_NUMBER_RE = re.compile(r"\d[\d,]*(?:\.(?P<decimals>\d+))?")
_NEEDS_QUOTES_RE = re.compile(r"[\s\d\-+.,@;=(){}\[\]]")


@dataclass(frozen=True)
class PricePoint:
    """Historical quote of one unit of a commodity in another commodity."""

    date: date
    price: Amount


@dataclass(eq=False)
class Commodity:
    """A currency or tradeable unit.

    Attributes:
        symbol: Identity of the commodity (``$``, ``EUR``, ``AAPL``).
        precision: Decimal places used for display.
        display_format: Sample amount from a ``format`` sub-directive.
        thousands: Group integer digits with commas when displaying.
        prefix: Force symbol placement; ``None`` infers it from the symbol.
        price_history: Price points ordered by date, then quote symbol.
    """

    symbol: str
    precision: int = DEFAULT_PRECISION
    display_format: str | None = None
    thousands: bool = False
    prefix: bool | None = None
    note: str | None = None
    no_market: bool = False
    alias: str | None = None
    price_history: list[PricePoint] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commodity):
            return NotImplemented
        return self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash(self.symbol)

    def __repr__(self) -> str:
        return f"Commodity({self.symbol!r}, precision={self.precision})"

    @property
    def is_prefix(self) -> bool:
        """Return True when the symbol is written before the number."""
        if self.prefix is not None:
            return self.prefix
        return self.symbol in PREFIX_COMMODITY_SYMBOLS

    @property
    def display_symbol(self) -> str:
        """Return the symbol, quoted when it would not re-parse bare."""
        if _NEEDS_QUOTES_RE.search(self.symbol):
            return f'"{self.symbol}"'
        return self.symbol

    def learn_precision(self, precision: int) -> None:
        """Record the precision seen on an amount literal.

        An explicit ``format`` pins the precision; otherwise the latest
        literal wins.
        """
        if self.display_format is None:
            self.precision = precision

    def apply_format(self, sample: str) -> None:
        """Adopt the display settings shown by a sample such as ``$1,000.00``.

        Args:
            sample: Formatted amount taken from a commodity directive.

        Raises:
            ValueError: If the sample contains no number.
        """
        cleaned = sample.strip()
        match = _FORMAT_NUMBER_RE.search(cleaned)
        if match is None:
            raise ValueError(f"invalid commodity format: {sample}")
        decimals = match.group("decimals") or ""
        self.display_format = cleaned
        self.precision = len(decimals)
        self.thousands = "," in match.group(0)
        self.prefix = bool(cleaned[: match.start()].replace("-", "").strip())

    def format_number(self, value: Fraction) -> str:
        """Render a number with this commodity's precision and grouping."""
        return format_fraction(value, self.precision, self.thousands)

    def add_price(self, on_date: date, price: Amount) -> None:
        """Insert a price point keeping chronological order.

        A point with the same date and quote commodity is replaced.
        """
        point = PricePoint(date=on_date, price=price)
        quote = price.commodity.symbol
        for index, existing in enumerate(self.price_history):
            existing_quote = existing.price.commodity.symbol
            if existing.date == on_date and existing_quote == quote:
                self.price_history[index] = point
                return
            if on_date < existing.date or (
                on_date == existing.date and quote < existing_quote
            ):
                self.price_history.insert(index, point)
                return
        self.price_history.append(point)

    def price_at(self, on_date: date, target: str) -> Amount | None:
        """Return the newest price in ``target`` dated on or before a date."""
        best = None
        for point in self.price_history:
            if point.date > on_date:
                break
            if point.price.commodity.symbol == target:
                best = point.price
        return best

    def latest_price(self, target: str) -> Amount | None:
        """Return the most recent price quoted in ``target``."""
        for point in reversed(self.price_history):
            if point.price.commodity.symbol == target:
                return point.price
        return None

    def has_price_history(self) -> bool:
        return bool(self.price_history)


class CommodityRegistry:
    """Commodities known to one journal, created on first reference."""

    def __init__(self, default_symbol: str = DEFAULT_COMMODITY_SYMBOL) -> None:
        self.default_symbol = default_symbol
        self._commodities: dict[str, Commodity] = {}
        self._aliases: dict[str, str] = {}

    def __contains__(self, symbol: str) -> bool:
        return self._resolve(symbol) in self._commodities

    def __len__(self) -> int:
        return len(self._commodities)

    def _resolve(self, symbol: str) -> str:
        return self._aliases.get(symbol, symbol)

    def find(self, symbol: str) -> Commodity | None:
        return self._commodities.get(self._resolve(symbol))

    def get_or_create(self, symbol: str) -> Commodity:
        """Return the commodity for ``symbol``, registering it if needed."""
        resolved = self._resolve(symbol)
        commodity = self._commodities.get(resolved)
        if commodity is None:
            commodity = Commodity(symbol=resolved)
            self._commodities[resolved] = commodity
        return commodity

    def default(self) -> Commodity:
        """Return the commodity used for bare numbers."""
        return self.get_or_create(self.default_symbol)

    def register(self, commodity: Commodity) -> None:
        self._commodities[commodity.symbol] = commodity

    def add_alias(self, alias: str, symbol: str) -> None:
        """Make ``alias`` resolve to ``symbol`` on later lookups."""
        self._aliases[alias] = symbol
        self.get_or_create(symbol).alias = alias

    def symbols(self) -> list[str]:
        return sorted(self._commodities)

    def all(self) -> list[Commodity]:
        return [self._commodities[symbol] for symbol in self.symbols()]


__all__ = ["PricePoint", "Commodity", "CommodityRegistry"]
