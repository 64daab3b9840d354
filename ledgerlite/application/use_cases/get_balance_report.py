"""Use case to compute the balance report."""

from dataclasses import dataclass, field

from ledgerlite.application.journal import Journal
from ledgerlite.domain.models import Balance, BalanceRow
from ledgerlite.domain.services import group_account_balances, sum_leaf_balances
from ledgerlite.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BalanceReportOptions:
    """Switches of the balance command.

    Attributes:
        flat: Show full account names without synthesized parent rows.
        no_total: Omit the total line.
        show_empty: Keep zero balances.
        no_rollup: Aggregate to top-level accounts only.
        exchange: Commodity symbol every balance is converted into.
        patterns: Case-insensitive account substrings limiting the scope.
    """

    flat: bool = False
    no_total: bool = False
    show_empty: bool = False
    no_rollup: bool = False
    exchange: str | None = None
    patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class BalanceReport:
    """Rows of a balance report and the optional total line."""

    rows: list[BalanceRow] = field(default_factory=list)
    total: Balance | None = None


class GetBalanceReportUseCase:
    """Build balance report rows from a loaded journal."""

    def __init__(self, journal: Journal, logger=None) -> None:
        """Initialize the use case.

        Args:
            journal: Loaded journal to report on.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._journal = journal
        self._logger = logger or get_app_logger()

    def execute(
        self,
        options: BalanceReportOptions | None = None,
    ) -> BalanceReport:
        """Return the balance report for the accounts in scope.

        Args:
            options: Report switches; defaults to a hierarchical report.

        Returns:
            BalanceReport: Sorted rows plus the total, which is None when
            ``no_total`` is set or no row is shown.
        """
        options = options or BalanceReportOptions()
        leaf_balances = {
            name: self._journal.leaf_balance(name)
            for name in self._accounts_in_scope(options.patterns)
        }
        if options.exchange:
            leaf_balances = self._convert(leaf_balances, options.exchange)

        rows = group_account_balances(
            leaf_balances,
            flat=options.flat,
            no_rollup=options.no_rollup,
            show_empty=options.show_empty,
        )
        total = None
        if rows and not options.no_total:
            total = sum_leaf_balances(leaf_balances)
        self._logger.info(
            f"Balance report built with {len(rows)} rows "
            f"from {len(leaf_balances)} accounts"
        )
        return BalanceReport(rows=rows, total=total)

    def _accounts_in_scope(self, patterns: tuple[str, ...]) -> list[str]:
        if not patterns:
            return self._journal.all_accounts()
        names: set[str] = set()
        for pattern in patterns:
            names.update(self._journal.accounts_matching(pattern))
        return sorted(names)

    def _convert(
        self,
        leaf_balances: dict[str, Balance],
        symbol: str,
    ) -> dict[str, Balance]:
        target = self._journal.commodity(symbol)
        if target is None:
            self._logger.warning(
                f"Unknown exchange commodity {symbol}; balances left as is"
            )
            return leaf_balances
        return {
            name: balance.convert_to(target)
            for name, balance in leaf_balances.items()
        }


__all__ = [
    "BalanceReportOptions",
    "BalanceReport",
    "GetBalanceReportUseCase",
]
