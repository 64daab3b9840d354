"""In-memory journal and its query API."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from ledgerlite.application.ports.journal_parser import JournalParserPort
from ledgerlite.domain.constants import DEFAULT_COMMODITY_SYMBOL
from ledgerlite.domain.models import (
    Account,
    AccountTree,
    Balance,
    Commodity,
    CommodityRegistry,
    Directive,
    Posting,
    Transaction,
)
from ledgerlite.domain.models.account import is_same_or_descendant
from ledgerlite.infrastructure.logging.logger import get_app_logger


def _contains(text: str, pattern: str) -> bool:
    return pattern.lower() in text.lower()


class Journal:
    """Transactions of one journal plus derived indices.

    Every load parses into fresh registries; they replace the current
    state only when parsing succeeds, so a failed load changes nothing.
    """

    def __init__(
        self,
        parser: JournalParserPort,
        default_commodity: str = DEFAULT_COMMODITY_SYMBOL,
        logger=None,
    ) -> None:
        """Initialize an empty journal.

        Args:
            parser: Port turning journal text into domain objects.
            default_commodity: Symbol given to bare numbers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._parser = parser
        self._default_commodity = default_commodity
        self._logger = logger or get_app_logger()
        self._accounts = AccountTree()
        self._commodities = CommodityRegistry(default_commodity)
        self._transactions: list[Transaction] = []
        self._directives: list[Directive] = []
        self._accounts_used: list[str] = []
        self._commodities_used: list[str] = []
        self._payees: list[str] = []

    def load_from_text(self, source: str | TextIO) -> None:
        """Parse journal text and replace the journal's contents.

        Args:
            source: Journal text or a readable text stream.

        Raises:
            JournalParseError: If the text cannot be parsed. The journal
                keeps its previous contents.
        """
        text = source if isinstance(source, str) else source.read()
        accounts = AccountTree()
        commodities = CommodityRegistry(self._default_commodity)
        parsed = self._parser.parse(text, accounts, commodities)

        self._accounts = accounts
        self._commodities = commodities
        self._transactions = list(parsed.transactions)
        self._directives = list(parsed.directives)
        self._rebuild_indices()
        self._logger.info(
            f"Loaded {len(self._transactions)} transactions touching "
            f"{len(self._accounts_used)} accounts"
        )

    def _rebuild_indices(self) -> None:
        accounts: set[str] = set()
        commodities: set[str] = set()
        payees: set[str] = set()
        for transaction in self._transactions:
            if transaction.payee:
                payees.add(transaction.payee)
            for posting in transaction.postings:
                accounts.add(posting.account.full_name)
                for amount in (
                    posting.amount,
                    posting.cost.amount if posting.cost else None,
                    posting.price.amount if posting.price else None,
                ):
                    if amount is not None:
                        commodities.add(amount.commodity.symbol)
        self._accounts_used = sorted(accounts)
        self._commodities_used = sorted(commodities)
        self._payees = sorted(payees)

    @property
    def accounts(self) -> AccountTree:
        return self._accounts

    @property
    def commodities(self) -> CommodityRegistry:
        return self._commodities

    def default_commodity(self) -> Commodity:
        return self._commodities.default()

    def transactions(self) -> list[Transaction]:
        """Return transactions in file order."""
        return list(self._transactions)

    def postings(self) -> Iterator[Posting]:
        for transaction in self._transactions:
            yield from transaction.postings

    def directives(self) -> list[Directive]:
        return list(self._directives)

    def transaction_of(self, posting: Posting) -> Transaction:
        return self._transactions[posting.transaction_index]

    def all_accounts(self) -> list[str]:
        """Return the sorted full names of accounts posted to."""
        return list(self._accounts_used)

    def accounts_matching(self, pattern: str) -> list[str]:
        """Return posted-to accounts containing ``pattern``, ignoring case."""
        return [name for name in self._accounts_used if _contains(name, pattern)]

    def account(self, name: str) -> Account | None:
        return self._accounts.find(name)

    def commodity(self, symbol: str) -> Commodity | None:
        return self._commodities.find(symbol)

    def all_commodities(self) -> list[str]:
        return list(self._commodities_used)

    def commodities_for_account(self, pattern: str) -> list[str]:
        """Return commodities posted to accounts matching ``pattern``."""
        symbols = {
            posting.amount.commodity.symbol
            for posting in self.postings()
            if posting.amount is not None
            and _contains(posting.account.full_name, pattern)
        }
        return sorted(symbols)

    def all_payees(self) -> list[str]:
        return list(self._payees)

    def payees_matching(self, pattern: str) -> list[str]:
        return [payee for payee in self._payees if _contains(payee, pattern)]

    def leaf_balance(self, name: str) -> Balance:
        """Return the balance of ``name`` excluding its descendants."""
        balance = Balance()
        for posting in self.postings():
            if posting.account.full_name == name:
                balance.add(posting.amount)
        return balance

    def rolled_up_balance(self, name: str) -> Balance:
        """Return the balance of ``name`` including its descendants."""
        balance = Balance()
        for posting in self.postings():
            if is_same_or_descendant(posting.account.full_name, name):
                balance.add(posting.amount)
        return balance

    def total_balance(self) -> Balance:
        balance = Balance()
        for posting in self.postings():
            balance.add(posting.amount)
        return balance


__all__ = ["Journal"]
