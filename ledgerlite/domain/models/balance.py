"""Multi-commodity balances."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date

from ledgerlite.domain.models.amount import Amount
from ledgerlite.domain.models.commodity import Commodity


class Balance:
    """Sum of amounts partitioned by commodity symbol.

    Entries that reach zero are removed, so an empty Balance is zero.
    """

    def __init__(self, amounts: Iterable[Amount] = ()) -> None:
        self._amounts: dict[str, Amount] = {}
        for amount in amounts:
            self.add(amount)

    def add(self, amount: Amount | None) -> None:
        """Add an amount, pruning the commodity entry if it reaches zero."""
        if amount is None or amount.is_zero():
            return
        symbol = amount.commodity.symbol
        existing = self._amounts.get(symbol)
        total = amount if existing is None else existing + amount
        if total.is_zero():
            del self._amounts[symbol]
        else:
            self._amounts[symbol] = total

    def subtract(self, amount: Amount | None) -> None:
        if amount is None:
            return
        self.add(-amount)

    def add_balance(self, other: Balance) -> None:
        for amount in other:
            self.add(amount)

    def subtract_balance(self, other: Balance) -> None:
        for amount in other:
            self.subtract(amount)

    def get(self, symbol: str) -> Amount | None:
        return self._amounts.get(symbol)

    def has(self, symbol: str) -> bool:
        return symbol in self._amounts

    def amounts(self) -> list[Amount]:
        """Return the stored amounts ordered by commodity symbol."""
        return [self._amounts[symbol] for symbol in self.commodities()]

    def commodities(self) -> list[str]:
        return sorted(self._amounts)

    def is_zero(self) -> bool:
        return not self._amounts

    def has_single_commodity(self) -> bool:
        return len(self._amounts) == 1

    def has_multiple_commodities(self) -> bool:
        return len(self._amounts) > 1

    def clear(self) -> None:
        self._amounts = {}

    def copy(self) -> Balance:
        result = Balance()
        result._amounts = dict(self._amounts)
        return result

    def negate(self) -> Balance:
        return Balance(-amount for amount in self)

    def abs(self) -> Balance:
        return Balance(abs(amount) for amount in self)

    def convert_to(self, target: Commodity) -> Balance:
        """Value every entry in ``target`` using its latest known price.

        Entries without a price quoted in ``target`` are kept as they are.
        """
        result = Balance()
        for amount in self:
            if amount.commodity.symbol == target.symbol:
                result.add(amount)
                continue
            price = amount.commodity.latest_price(target.symbol)
            if price is None:
                result.add(amount)
            else:
                result.add(amount.convert_to(target, price.value))
        return result

    def value_at(self, on_date: date, target: Commodity) -> Balance:
        """Value every entry in ``target`` using prices in effect on a date."""
        result = Balance()
        for amount in self:
            if amount.commodity.symbol == target.symbol:
                result.add(amount)
                continue
            price = amount.commodity.price_at(on_date, target.symbol)
            if price is None:
                result.add(amount)
            else:
                result.add(amount.convert_to(target, price.value))
        return result

    def format(self, separator: str = ", ", show_zero: bool = True) -> str:
        """Join the formatted amounts, or ``0`` when empty and shown."""
        if self.is_zero():
            return "0" if show_zero else ""
        return separator.join(amount.format() for amount in self)

    def validate(self) -> None:
        """Check the storage invariants.

        Raises:
            ValueError: If an entry is zero or stored under a foreign key.
        """
        for symbol, amount in self._amounts.items():
            if amount.commodity.symbol != symbol:
                raise ValueError(
                    f"commodity mismatch: key {symbol}, "
                    f"amount commodity {amount.commodity.symbol}"
                )
            if amount.is_zero():
                raise ValueError(
                    f"zero amount should not be stored for commodity {symbol}"
                )

    def __iter__(self) -> Iterator[Amount]:
        return iter(self.amounts())

    def __len__(self) -> int:
        return len(self._amounts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Balance):
            return NotImplemented
        return self._amounts == other._amounts

    def __repr__(self) -> str:
        return f"Balance({self.format()})"

    def __str__(self) -> str:
        return self.format()


__all__ = ["Balance"]
