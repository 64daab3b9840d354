"""Use case to list postings with a running total."""

from dataclasses import dataclass
from datetime import date

from ledgerlite.application.journal import Journal
from ledgerlite.domain.models import Amount, Balance


@dataclass(frozen=True)
class RegisterEntry:
    """One register line.

    Attributes:
        first_of_transaction: True for the first shown posting of its
            transaction; presenters print date and payee only there.
        running_total: Sum of every shown posting up to this one.
    """

    date: date
    payee: str
    account: str
    amount: Amount | None
    running_total: Balance
    transaction_index: int
    first_of_transaction: bool


def _matches(account: str, patterns: tuple[str, ...]) -> bool:
    if not patterns:
        return True
    lowered = account.lower()
    return any(pattern.lower() in lowered for pattern in patterns)


class ShowRegisterUseCase:
    """Walk postings in file order, optionally filtered by account."""

    def __init__(self, journal: Journal) -> None:
        self._journal = journal

    def execute(self, patterns: tuple[str, ...] = ()) -> list[RegisterEntry]:
        """Return register entries for postings matching ``patterns``."""
        entries = []
        running = Balance()
        for transaction in self._journal.transactions():
            first = True
            for posting in transaction.postings:
                if not _matches(posting.account.full_name, patterns):
                    continue
                running.add(posting.amount)
                entries.append(
                    RegisterEntry(
                        date=transaction.date,
                        payee=transaction.payee,
                        account=posting.account.full_name,
                        amount=posting.amount,
                        running_total=running.copy(),
                        transaction_index=transaction.index,
                        first_of_transaction=first,
                    )
                )
                first = False
        return entries


__all__ = ["RegisterEntry", "ShowRegisterUseCase"]
