"""Port for turning journal text into domain objects."""

from dataclasses import dataclass, field
from typing import Protocol

from ledgerlite.domain.models import (
    AccountTree,
    CommodityRegistry,
    Directive,
    Transaction,
)


@dataclass(frozen=True)
class ParsedJournal:
    """Result of a successful parse.

    Attributes:
        transactions: Transactions in file order.
        directives: Directives in file order, already applied.
    """

    transactions: list[Transaction] = field(default_factory=list)
    directives: list[Directive] = field(default_factory=list)


class JournalParserPort(Protocol):
    """Port exposing journal text parsing."""

    def parse(
        self,
        text: str,
        accounts: AccountTree,
        commodities: CommodityRegistry,
    ) -> ParsedJournal:
        """Parse journal text into the given registries.

        Args:
            text: Full journal contents.
            accounts: Account tree populated as postings are read.
            commodities: Commodity registry populated as amounts are read.

        Returns:
            ParsedJournal: Transactions and directives in file order.

        Raises:
            JournalParseError: On the first malformed construct.
        """


__all__ = ["ParsedJournal", "JournalParserPort"]
