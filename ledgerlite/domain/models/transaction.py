"""Postings and the transactions that group them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from ledgerlite.domain.models.account import Account
from ledgerlite.domain.models.amount import Amount
from ledgerlite.domain.models.balance import Balance


class TransactionStatus(str, Enum):
    """Clearing state: absent marker, ``*`` or ``!``."""

    PENDING = "pending"
    CLEARED = "cleared"
    RECONCILED = "reconciled"

    @property
    def marker(self) -> str:
        return _STATUS_MARKERS[self]

    @classmethod
    def from_marker(cls, marker: str | None) -> TransactionStatus:
        if marker == "*":
            return cls.CLEARED
        if marker == "!":
            return cls.RECONCILED
        return cls.PENDING


_STATUS_MARKERS = {
    TransactionStatus.PENDING: "",
    TransactionStatus.CLEARED: "*",
    TransactionStatus.RECONCILED: "!",
}


class PostingType(str, Enum):
    """``Account``, ``(Account)`` or ``[Account]``."""

    NORMAL = "normal"
    VIRTUAL = "virtual"
    BRACKETED = "bracketed"


@dataclass(frozen=True)
class CostSpec:
    """Lot cost written as ``{per-unit}`` or ``{{total}}``."""

    amount: Amount
    is_total: bool = False


@dataclass(frozen=True)
class PriceSpec:
    """Price written as ``@ per-unit`` or ``@@ total``."""

    amount: Amount
    is_total: bool = False


@dataclass(frozen=True)
class BalanceAssertion:
    """``== amount`` assertion or ``= amount`` assignment."""

    amount: Amount
    is_assignment: bool = False


@dataclass(eq=False)
class Posting:
    """One account/amount line of a transaction.

    Attributes:
        amount: None until elision fills it, or when elision is skipped.
        is_expression: The amount came from an unevaluated ``(expr)``.
        is_generated: The amount was inferred rather than written.
        transaction_index: Position of the owning transaction in the journal.
    """

    account: Account
    amount: Amount | None = None
    cost: CostSpec | None = None
    price: PriceSpec | None = None
    balance_assertion: BalanceAssertion | None = None
    note: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    posting_type: PostingType = PostingType.NORMAL
    status: TransactionStatus | None = None
    is_expression: bool = False
    is_generated: bool = False
    transaction_index: int | None = None

    @property
    def is_virtual(self) -> bool:
        return self.posting_type is not PostingType.NORMAL

    @property
    def is_bracketed(self) -> bool:
        return self.posting_type is PostingType.BRACKETED

    @property
    def must_balance(self) -> bool:
        """Parenthesized virtual postings are exempt from balancing."""
        return self.posting_type is not PostingType.VIRTUAL

    def has_cost(self) -> bool:
        return self.cost is not None

    def has_price(self) -> bool:
        return self.price is not None

    def has_balance_assertion(self) -> bool:
        return self.balance_assertion is not None

    def _signed_total(self, annotated: Amount, is_total: bool) -> Amount:
        if self.amount is None:
            return annotated
        if is_total:
            return -annotated if self.amount.is_negative() else annotated
        return annotated * self.amount.value

    def cost_amount(self) -> Amount | None:
        """Return the total cost of the posted quantity."""
        if self.cost is None:
            return None
        return self._signed_total(self.cost.amount, self.cost.is_total)

    def price_amount(self) -> Amount | None:
        """Return the total price of the posted quantity."""
        if self.price is None:
            return None
        return self._signed_total(self.price.amount, self.price.is_total)

    def unit_price(self) -> Amount | None:
        """Return the per-unit price, dividing a total price by quantity."""
        if self.price is None:
            return None
        if not self.price.is_total:
            return self.price.amount
        if self.amount is None or self.amount.is_zero():
            return None
        return self.price.amount / abs(self.amount.value)

    def weight(self) -> Amount | None:
        """Return the amount this posting contributes to balancing."""
        if self.amount is None:
            return None
        if self.cost is not None:
            return self.cost_amount()
        if self.price is not None:
            return self.price_amount()
        return self.amount

    def market_value(self) -> Amount | None:
        if self.price is not None and self.amount is not None:
            return self.price_amount()
        return self.amount


@dataclass(eq=False)
class Transaction:
    """A dated, balanced group of postings."""

    date: date
    payee: str = ""
    status: TransactionStatus = TransactionStatus.PENDING
    aux_date: date | None = None
    code: str | None = None
    note: str | None = None
    postings: list[Posting] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)
    line_number: int | None = None
    index: int | None = None

    def add_posting(self, posting: Posting) -> None:
        posting.transaction_index = self.index
        self.postings.append(posting)

    def has_expression_postings(self) -> bool:
        return any(posting.is_expression for posting in self.postings)

    def balancing_postings(self) -> list[Posting]:
        return [posting for posting in self.postings if posting.must_balance]

    def imbalance(self) -> Balance:
        """Return the per-commodity sum of balancing posting weights."""
        total = Balance()
        for posting in self.balancing_postings():
            total.add(posting.weight())
        return total

    def is_balanced(self) -> bool:
        if len(self.postings) < 2:
            return False
        return self.imbalance().is_zero()

    def __str__(self) -> str:
        return f"{self.date:%Y/%m/%d} {self.payee}"


__all__ = [
    "TransactionStatus",
    "PostingType",
    "CostSpec",
    "PriceSpec",
    "BalanceAssertion",
    "Posting",
    "Transaction",
]
