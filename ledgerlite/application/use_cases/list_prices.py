"""Use case to list known price points."""

from dataclasses import dataclass
from datetime import date

from ledgerlite.application.journal import Journal
from ledgerlite.domain.models import Amount, PriceDirective


@dataclass(frozen=True)
class PriceEntry:
    """One unit of ``commodity`` was worth ``price`` on ``date``."""

    date: date
    commodity: str
    price: Amount


class ListPricesUseCase:
    """Collect prices from ``P`` directives and priced postings."""

    def __init__(self, journal: Journal) -> None:
        self._journal = journal

    def execute(self, commodity_prefix: str | None = None) -> list[PriceEntry]:
        """Return deduplicated prices sorted by date then commodity.

        Args:
            commodity_prefix: Keep entries whose priced or quote commodity
                starts with this prefix.

        Returns:
            list[PriceEntry]: Matching price entries.
        """
        entries: list[PriceEntry] = []
        seen: set[tuple] = set()
        for entry in self._collect():
            key = (
                entry.date,
                entry.commodity,
                entry.price.commodity.symbol,
                entry.price.value,
            )
            if key in seen:
                continue
            seen.add(key)
            entries.append(entry)

        if commodity_prefix:
            entries = [
                entry
                for entry in entries
                if entry.commodity.startswith(commodity_prefix)
                or entry.price.commodity.symbol.startswith(commodity_prefix)
            ]
        return sorted(
            entries,
            key=lambda entry: (
                entry.date,
                entry.commodity,
                entry.price.commodity.symbol,
            ),
        )

    def _collect(self):
        for directive in self._journal.directives():
            if isinstance(directive, PriceDirective):
                yield PriceEntry(
                    date=directive.date,
                    commodity=directive.symbol,
                    price=directive.price,
                )
        for transaction in self._journal.transactions():
            for posting in transaction.postings:
                if posting.amount is None or posting.is_expression:
                    continue
                unit_price = posting.unit_price()
                if unit_price is None or unit_price.is_zero():
                    continue
                yield PriceEntry(
                    date=transaction.date,
                    commodity=posting.amount.commodity.symbol,
                    price=unit_price,
                )


__all__ = ["PriceEntry", "ListPricesUseCase"]
