"""Domain models package."""

from .account import Account, AccountTree, AccountType, determine_account_type
from .amount import Amount
from .balance import Balance
from .commodity import Commodity, CommodityRegistry, PricePoint
from .directive import (
    AccountDirective,
    CommodityDirective,
    Directive,
    PriceDirective,
    apply_directive,
)
from .report import BalanceRow
from .transaction import (
    BalanceAssertion,
    CostSpec,
    Posting,
    PostingType,
    PriceSpec,
    Transaction,
    TransactionStatus,
)

__all__ = [
    "Account",
    "AccountTree",
    "AccountType",
    "determine_account_type",
    "Amount",
    "Balance",
    "BalanceRow",
    "Commodity",
    "CommodityRegistry",
    "PricePoint",
    "AccountDirective",
    "CommodityDirective",
    "PriceDirective",
    "Directive",
    "apply_directive",
    "BalanceAssertion",
    "CostSpec",
    "PriceSpec",
    "Posting",
    "PostingType",
    "Transaction",
    "TransactionStatus",
]
