"""Use case to build an opening balances transaction."""

from datetime import date
from typing import Callable

from ledgerlite.application.journal import Journal
from ledgerlite.domain.constants import OPENING_BALANCES_ACCOUNT
from ledgerlite.domain.models import (
    AccountTree,
    Balance,
    Posting,
    Transaction,
    TransactionStatus,
)

OPENING_BALANCES_PAYEE = "Opening Balances"


class BuildEquityUseCase:
    """Carry every account balance forward into one transaction.

    The transaction is dated at the latest journal date and closes each
    commodity against ``Equity:Opening Balances``.
    """

    def __init__(
        self,
        journal: Journal,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._journal = journal
        self._today = today

    def execute(self, pattern: str | None = None) -> Transaction:
        """Return the opening balances transaction.

        Args:
            pattern: Case-insensitive substring limiting the accounts.

        Returns:
            Transaction: Account postings sorted by name, followed by the
            offsetting equity postings ordered from most negative.
        """
        transactions = self._journal.transactions()
        on_date = max(
            (transaction.date for transaction in transactions),
            default=self._today(),
        )
        names = (
            self._journal.accounts_matching(pattern)
            if pattern
            else self._journal.all_accounts()
        )
        balances: dict[str, Balance] = {
            name: self._journal.leaf_balance(name) for name in names
        }

        equity = Transaction(
            date=on_date,
            payee=OPENING_BALANCES_PAYEE,
            status=TransactionStatus.PENDING,
        )
        offsets = []
        tree = AccountTree()
        equity_account = tree.get_or_create(OPENING_BALANCES_ACCOUNT)
        for name in sorted(balances):
            account = self._journal.account(name) or tree.get_or_create(name)
            for amount in balances[name]:
                equity.add_posting(Posting(account=account, amount=amount))
                offsets.append(-amount)

        for amount in sorted(offsets, key=lambda amount: amount.value):
            equity.add_posting(Posting(account=equity_account, amount=amount))
        return equity


__all__ = ["BuildEquityUseCase", "OPENING_BALANCES_PAYEE"]
