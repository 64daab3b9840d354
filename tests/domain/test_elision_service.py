"""Tests for elided amount inference."""

from datetime import date

import pytest

from ledgerlite.domain.errors import ElisionError
from ledgerlite.domain.models import (
    AccountTree,
    Amount,
    Commodity,
    Posting,
    PostingType,
    PriceSpec,
    Transaction,
)
from ledgerlite.domain.services import infer_elided_amount

DOLLAR = Commodity("$")
USD = Commodity("USD")


def _build_transaction(*postings: tuple) -> Transaction:
    tree = AccountTree()
    transaction = Transaction(date=date(2011, 1, 1), payee="Test", index=0)
    for name, amount, *extra in postings:
        kwargs = extra[0] if extra else {}
        transaction.add_posting(
            Posting(account=tree.get_or_create(name), amount=amount, **kwargs)
        )
    return transaction


def test_infers_negated_sum() -> None:
    """The missing amount should balance the other postings."""
    transaction = _build_transaction(
        ("Assets:Cash", Amount(10, USD)),
        ("Equity:Opening balance", None),
    )

    posting = infer_elided_amount(transaction, DOLLAR)

    assert posting is transaction.postings[1]
    assert posting.amount == Amount(-10, USD)
    assert posting.is_generated


def test_returns_none_when_nothing_missing() -> None:
    """Fully written transactions are left alone."""
    transaction = _build_transaction(
        ("Assets:Cash", Amount(10, USD)),
        ("Income:Salary", Amount(-10, USD)),
    )

    assert infer_elided_amount(transaction, DOLLAR) is None


def test_rejects_two_missing_amounts() -> None:
    """Only one posting may omit its amount."""
    transaction = _build_transaction(
        ("Assets:Cash", Amount(10, USD)),
        ("Expenses:Food", None),
        ("Expenses:Rent", None),
    )

    with pytest.raises(ElisionError, match="only one posting"):
        infer_elided_amount(transaction, DOLLAR)


def test_rejects_multiple_commodities() -> None:
    """The remaining postings must share one commodity."""
    transaction = _build_transaction(
        ("Assets:Cash", Amount(10, USD)),
        ("Assets:Wallet", Amount(5, Commodity("EUR"))),
        ("Equity:Opening", None),
    )

    with pytest.raises(ElisionError, match="multiple commodities"):
        infer_elided_amount(transaction, DOLLAR)


def test_uses_price_weight_and_skips_virtual() -> None:
    """Priced postings weigh their price; virtual postings do not count."""
    transaction = _build_transaction(
        (
            "Assets:Broker",
            Amount(10, Commodity("AAPL")),
            {"price": PriceSpec(Amount(15, DOLLAR))},
        ),
        (
            "Budget:Stocks",
            Amount(99, DOLLAR),
            {"posting_type": PostingType.VIRTUAL},
        ),
        ("Assets:Checking", None),
    )

    posting = infer_elided_amount(transaction, DOLLAR)

    assert posting.amount == Amount(-150, DOLLAR)


def test_skips_when_expression_present() -> None:
    """An unevaluated expression leaves the elided amount absent."""
    transaction = _build_transaction(
        ("Assets:Cash", Amount(0, DOLLAR), {"is_expression": True}),
        ("Income:Salary", None),
    )

    assert infer_elided_amount(transaction, DOLLAR) is None
    assert transaction.postings[1].amount is None


def test_defaults_to_zero_without_other_amounts() -> None:
    """With only virtual amounts the elided posting gets zero."""
    transaction = _build_transaction(
        (
            "Budget:Food",
            Amount(5, USD),
            {"posting_type": PostingType.VIRTUAL},
        ),
        ("Assets:Cash", None),
    )

    posting = infer_elided_amount(transaction, DOLLAR)

    assert posting.amount.is_zero()
    assert posting.amount.commodity is DOLLAR
