"""Domain validation helpers."""

from ledgerlite.domain.errors import (
    BalanceAssertionError,
    UnbalancedTransactionError,
)
from ledgerlite.domain.models import Amount, Balance, Posting, Transaction


def validate_transaction_balance(transaction: Transaction) -> None:
    """Check that the balancing postings' weights sum to exactly zero.

    The check is exact; display precision plays no part. Transactions
    holding an unevaluated expression amount are not checked.

    Args:
        transaction: Transaction after elision.

    Raises:
        UnbalancedTransactionError: If a commodity has a non-zero sum.
    """
    if transaction.has_expression_postings():
        return
    residual = transaction.imbalance()
    if not residual.is_zero():
        raise UnbalancedTransactionError(
            f"transaction does not balance: {residual.format()}"
        )


def check_balance_assertion(posting: Posting, running: Balance) -> None:
    """Compare an account's running balance with the posting's assertion.

    Args:
        posting: Posting carrying a balance assertion or assignment.
        running: Balance of the posting's account after its transaction.

    Raises:
        BalanceAssertionError: If the asserted commodity total differs.
    """
    assertion = posting.balance_assertion
    if assertion is None:
        return
    expected = assertion.amount
    actual = running.get(expected.commodity.symbol)
    if actual is None:
        actual = Amount.zero(expected.commodity)
    if actual.value != expected.value:
        raise BalanceAssertionError(
            f"balance assertion failed for {posting.account.full_name}: "
            f"expected {expected.format()}, got {actual.format()}"
        )


__all__ = ["validate_transaction_balance", "check_balance_assertion"]
