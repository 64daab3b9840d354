"""Domain services package."""

from .balance_grouping import group_account_balances, sum_leaf_balances
from .elision import infer_elided_amount
from .validation import check_balance_assertion, validate_transaction_balance

__all__ = [
    "group_account_balances",
    "sum_leaf_balances",
    "infer_elided_amount",
    "check_balance_assertion",
    "validate_transaction_balance",
]
