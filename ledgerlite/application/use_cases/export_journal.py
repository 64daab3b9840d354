"""Use case for exporting a loaded journal into a SQL database.

The export flattens transactions, postings and price points into records
and hands them to a JournalStorePort, which replaces whatever an earlier
export left behind.
"""

from dataclasses import dataclass

from ledgerlite.application.journal import Journal
from ledgerlite.application.ports.journal_store import (
    JournalStorePort,
    PostingRecord,
    PriceRecord,
    TransactionRecord,
)
from ledgerlite.application.use_cases.list_prices import ListPricesUseCase
from ledgerlite.domain.models import Transaction
from ledgerlite.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExportJournalResult:
    """Summary of an export run.

    Attributes:
        transaction_count: Transactions written.
        posting_count: Posting rows written.
        price_count: Price rows written.
    """

    transaction_count: int
    posting_count: int
    price_count: int


class ExportJournalUseCase:
    """Write the journal to storage through a JournalStorePort."""

    def __init__(
        self,
        journal: Journal,
        store: JournalStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            journal: Loaded journal to export.
            store: Destination for the flattened records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._journal = journal
        self._store = store
        self._logger = logger or get_app_logger()

    def run(self) -> ExportJournalResult:
        """Execute the export.

        Returns:
            ExportJournalResult: Row counts written per table.
        """
        transactions = []
        postings = []
        for transaction in self._journal.transactions():
            transactions.append(self._transaction_record(transaction))
            postings.extend(self._posting_records(transaction))
        prices = [
            PriceRecord(
                date=entry.date,
                commodity=entry.commodity,
                price=entry.price.to_decimal(),
                quote_commodity=entry.price.commodity.symbol,
            )
            for entry in ListPricesUseCase(self._journal).execute()
        ]

        self._store.prepare_destination()
        written = self._store.replace_journal(transactions, postings, prices)
        self._logger.info(
            f"Exported {len(transactions)} transactions, {written} postings "
            f"and {len(prices)} prices"
        )
        return ExportJournalResult(
            transaction_count=len(transactions),
            posting_count=written,
            price_count=len(prices),
        )

    @staticmethod
    def _transaction_record(transaction: Transaction) -> TransactionRecord:
        return TransactionRecord(
            transaction_id=transaction.index,
            date=transaction.date,
            aux_date=transaction.aux_date,
            status=transaction.status.value,
            code=transaction.code,
            payee=transaction.payee,
            note=transaction.note,
        )

    @staticmethod
    def _posting_records(transaction: Transaction) -> list[PostingRecord]:
        records = []
        for position, posting in enumerate(transaction.postings):
            amount = posting.amount
            records.append(
                PostingRecord(
                    transaction_id=transaction.index,
                    position=position,
                    account=posting.account.full_name,
                    amount=amount.to_decimal() if amount is not None else None,
                    commodity=amount.commodity.symbol if amount is not None else None,
                    posting_type=posting.posting_type.value,
                    is_generated=posting.is_generated,
                    note=posting.note,
                )
            )
        return records


__all__ = ["ExportJournalUseCase", "ExportJournalResult"]
