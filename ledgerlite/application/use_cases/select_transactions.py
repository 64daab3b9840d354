"""Use case to select the transactions the print command shows."""

from ledgerlite.application.journal import Journal
from ledgerlite.domain.models import Transaction


class SelectTransactionsUseCase:
    """Return transactions touching accounts that match a pattern."""

    def __init__(self, journal: Journal) -> None:
        self._journal = journal

    def execute(self, patterns: tuple[str, ...] = ()) -> list[Transaction]:
        transactions = self._journal.transactions()
        if not patterns:
            return transactions
        lowered = [pattern.lower() for pattern in patterns]
        return [
            transaction
            for transaction in transactions
            if any(
                pattern in posting.account.full_name.lower()
                for posting in transaction.postings
                for pattern in lowered
            )
        ]


__all__ = ["SelectTransactionsUseCase"]
