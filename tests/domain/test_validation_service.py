"""Tests for transaction and assertion validation."""

from datetime import date
from fractions import Fraction

import pytest

from ledgerlite.domain.errors import (
    BalanceAssertionError,
    UnbalancedTransactionError,
)
from ledgerlite.domain.models import (
    AccountTree,
    Amount,
    Balance,
    BalanceAssertion,
    Commodity,
    Posting,
    Transaction,
)
from ledgerlite.domain.services import (
    check_balance_assertion,
    validate_transaction_balance,
)

USD = Commodity("USD")


def _build_transaction(*amounts, is_expression=False) -> Transaction:
    tree = AccountTree()
    transaction = Transaction(date=date(2024, 1, 1), payee="Test")
    for position, value in enumerate(amounts):
        transaction.add_posting(
            Posting(
                account=tree.get_or_create(f"Assets:A{position}"),
                amount=Amount(Fraction(value), USD),
                is_expression=is_expression and position == 0,
            )
        )
    return transaction


def test_balanced_transaction_passes() -> None:
    """Postings summing to zero are accepted."""
    validate_transaction_balance(_build_transaction("10.00", "-10.00"))


def test_unbalanced_transaction_raises() -> None:
    """A non-zero residual should be reported."""
    with pytest.raises(UnbalancedTransactionError, match="does not balance"):
        validate_transaction_balance(_build_transaction("10.00", "-9.00"))


@pytest.mark.parametrize(
    "amounts",
    [("10.004", "-10.00"), ("-10.00", "10.004")],
)
def test_residual_below_display_precision_raises(amounts) -> None:
    """Sub-cent residuals are imbalances whatever the posting order."""
    with pytest.raises(UnbalancedTransactionError):
        validate_transaction_balance(_build_transaction(*amounts))


def test_expression_transactions_are_not_checked() -> None:
    """Unevaluated expressions skip the balance check."""
    validate_transaction_balance(
        _build_transaction("0", "-10.00", is_expression=True)
    )


def test_balance_assertion_matches_running_balance() -> None:
    """A matching assertion should pass, a different one should fail."""
    account = AccountTree().get_or_create("Assets:Cash")
    posting = Posting(
        account=account,
        amount=Amount(5, USD),
        balance_assertion=BalanceAssertion(Amount(15, USD)),
    )

    check_balance_assertion(posting, Balance([Amount(15, USD)]))
    with pytest.raises(BalanceAssertionError, match="Assets:Cash"):
        check_balance_assertion(posting, Balance([Amount(12, USD)]))


def test_balance_assertion_of_zero_on_empty_balance() -> None:
    """An empty running balance satisfies an assertion of zero."""
    posting = Posting(
        account=AccountTree().get_or_create("Assets:Cash"),
        amount=Amount(0, USD),
        balance_assertion=BalanceAssertion(Amount(0, USD)),
    )

    check_balance_assertion(posting, Balance())
