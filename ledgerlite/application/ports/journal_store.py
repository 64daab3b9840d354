"""Ports for persisting a loaded journal into SQL storage."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol


@dataclass(frozen=True)
class TransactionRecord:
    """Flat transaction row for export."""

    transaction_id: int
    date: date
    aux_date: date | None
    status: str
    code: str | None
    payee: str
    note: str | None


@dataclass(frozen=True)
class PostingRecord:
    """Flat posting row for export."""

    transaction_id: int
    position: int
    account: str
    amount: Decimal | None
    commodity: str | None
    posting_type: str
    is_generated: bool
    note: str | None


@dataclass(frozen=True)
class PriceRecord:
    """Flat price point row for export."""

    date: date
    commodity: str
    price: Decimal
    quote_commodity: str


class JournalStorePort(Protocol):
    """Port exposing write access to journal storage."""

    def prepare_destination(self) -> None:
        """Ensure the destination tables exist."""

    def replace_journal(
        self,
        transactions: list[TransactionRecord],
        postings: list[PostingRecord],
        prices: list[PriceRecord],
    ) -> int:
        """Replace stored rows with the given records.

        Returns:
            int: Number of posting rows written.
        """


__all__ = [
    "TransactionRecord",
    "PostingRecord",
    "PriceRecord",
    "JournalStorePort",
]
