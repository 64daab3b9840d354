"""Use case to summarize journal activity."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable

from ledgerlite.application.journal import Journal
from ledgerlite.domain.models import TransactionStatus


@dataclass(frozen=True)
class JournalStats:
    """Activity figures for the stats command.

    Attributes:
        span_days: Inclusive number of days between first and last date.
        uncleared_postings: Postings of pending transactions.
    """

    first_date: date
    last_date: date
    span_days: int
    unique_payees: int
    unique_accounts: int
    posting_count: int
    uncleared_postings: int
    days_since_last_post: int
    posts_last_7_days: int
    posts_last_30_days: int
    posts_this_month: int

    @property
    def postings_per_day(self) -> float:
        return self.posting_count / self.span_days


class GetStatsUseCase:
    """Compute journal statistics relative to a given day."""

    def __init__(
        self,
        journal: Journal,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            journal: Loaded journal to summarize.
            today: Clock returning the reference day for recency figures.
        """
        self._journal = journal
        self._today = today

    def execute(self) -> JournalStats | None:
        """Return statistics, or None for a journal without transactions."""
        transactions = self._journal.transactions()
        if not transactions:
            return None

        first_date = min(transaction.date for transaction in transactions)
        last_date = max(transaction.date for transaction in transactions)
        today = self._today()
        cutoff_7 = today - timedelta(days=7)
        cutoff_30 = today - timedelta(days=30)
        month_start = today.replace(day=1)

        posting_count = 0
        uncleared = 0
        last_7 = 0
        last_30 = 0
        this_month = 0
        for transaction in transactions:
            count = len(transaction.postings)
            posting_count += count
            if transaction.status is TransactionStatus.PENDING:
                uncleared += count
            if transaction.date >= cutoff_7:
                last_7 += count
            if transaction.date >= cutoff_30:
                last_30 += count
            if transaction.date >= month_start:
                this_month += count

        return JournalStats(
            first_date=first_date,
            last_date=last_date,
            span_days=(last_date - first_date).days + 1,
            unique_payees=len(self._journal.all_payees()),
            unique_accounts=len(self._journal.all_accounts()),
            posting_count=posting_count,
            uncleared_postings=uncleared,
            days_since_last_post=(today - last_date).days,
            posts_last_7_days=last_7,
            posts_last_30_days=last_30,
            posts_this_month=this_month,
        )


__all__ = ["JournalStats", "GetStatsUseCase"]
