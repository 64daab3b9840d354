"""Tests for postings and transactions."""

from datetime import date
from fractions import Fraction

from ledgerlite.domain.models import (
    AccountTree,
    Amount,
    Commodity,
    CostSpec,
    Posting,
    PostingType,
    PriceSpec,
    Transaction,
    TransactionStatus,
)

DOLLAR = Commodity("$")
AAPL = Commodity("AAPL")


def _posting(name: str, amount: Amount | None = None, **kwargs) -> Posting:
    return Posting(account=AccountTree().get_or_create(name), amount=amount, **kwargs)


def test_status_markers_map_uniformly() -> None:
    """Absent, * and ! should map to pending, cleared and reconciled."""
    assert TransactionStatus.from_marker(None) is TransactionStatus.PENDING
    assert TransactionStatus.from_marker("*") is TransactionStatus.CLEARED
    assert TransactionStatus.from_marker("!") is TransactionStatus.RECONCILED
    assert TransactionStatus.RECONCILED.marker == "!"
    assert TransactionStatus.PENDING.marker == ""


def test_weight_uses_per_unit_price() -> None:
    """A per-unit price should weigh quantity times price."""
    posting = _posting(
        "Assets:Broker",
        Amount(10, AAPL),
        price=PriceSpec(Amount(150, DOLLAR)),
    )

    assert posting.weight().value == 1500
    assert posting.weight().commodity is DOLLAR
    assert posting.unit_price().value == 150


def test_weight_uses_total_price_with_quantity_sign() -> None:
    """A total price should take the sign of the posted quantity."""
    posting = _posting(
        "Assets:Broker",
        Amount(-4, AAPL),
        price=PriceSpec(Amount(600, DOLLAR), is_total=True),
    )

    assert posting.weight().value == -600
    assert posting.unit_price().value == 150


def test_cost_takes_precedence_over_price() -> None:
    """A lot cost should decide the weight when both are present."""
    posting = _posting(
        "Assets:Broker",
        Amount(2, AAPL),
        cost=CostSpec(Amount(Fraction(100), DOLLAR)),
        price=PriceSpec(Amount(130, DOLLAR)),
    )

    assert posting.weight().value == 200
    assert posting.market_value().value == 260


def test_imbalance_ignores_virtual_postings() -> None:
    """Parenthesized postings are exempt; bracketed ones must balance."""
    transaction = Transaction(date=date(2024, 1, 1), payee="Budget", index=0)
    transaction.add_posting(_posting("Assets:Cash", Amount(10, DOLLAR)))
    transaction.add_posting(_posting("Income:Gift", Amount(-10, DOLLAR)))
    transaction.add_posting(
        _posting(
            "Budget:Food",
            Amount(50, DOLLAR),
            posting_type=PostingType.VIRTUAL,
        )
    )

    assert transaction.is_balanced()
    assert transaction.postings[0].transaction_index == 0

    transaction.add_posting(
        _posting(
            "Budget:Rent",
            Amount(5, DOLLAR),
            posting_type=PostingType.BRACKETED,
        )
    )
    assert transaction.imbalance().get("$").value == 5


def test_single_posting_is_not_balanced() -> None:
    """A transaction needs at least two postings to balance."""
    transaction = Transaction(date=date(2024, 1, 1))
    transaction.add_posting(_posting("Assets:Cash", Amount(0, DOLLAR)))

    assert not transaction.is_balanced()
