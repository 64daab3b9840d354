"""Domain package for journal entities and accounting rules."""

from .constants import (
    DEFAULT_COMMODITY_SYMBOL,
    OPENING_BALANCES_ACCOUNT,
)
from .models import (
    Account,
    AccountTree,
    AccountType,
    Amount,
    Balance,
    BalanceRow,
    Commodity,
    CommodityRegistry,
    Posting,
    Transaction,
    TransactionStatus,
)
from .services import (
    group_account_balances,
    infer_elided_amount,
    sum_leaf_balances,
    validate_transaction_balance,
)

__all__ = [
    "Account",
    "AccountTree",
    "AccountType",
    "Amount",
    "Balance",
    "BalanceRow",
    "Commodity",
    "CommodityRegistry",
    "Posting",
    "Transaction",
    "TransactionStatus",
    "DEFAULT_COMMODITY_SYMBOL",
    "OPENING_BALANCES_ACCOUNT",
    "group_account_balances",
    "infer_elided_amount",
    "sum_leaf_balances",
    "validate_transaction_balance",
]
