"""Domain models for balance report rows."""

from dataclasses import dataclass

from ledgerlite.domain.models.account import leaf_name_of
from ledgerlite.domain.models.balance import Balance


@dataclass(frozen=True)
class BalanceRow:
    """One line of a balance report.

    Attributes:
        full_name: Full account name the row stands for.
        balance: Balance shown on the row.
        depth: 1 for top rows, 2 for children of a synthesized parent.
    """

    full_name: str
    balance: Balance
    depth: int = 1

    @property
    def display_name(self) -> str:
        """Return the full name at depth 1 and the leaf name below it."""
        if self.depth <= 1:
            return self.full_name
        return leaf_name_of(self.full_name)


__all__ = ["BalanceRow"]
