"""Tests for the GetBalanceReportUseCase."""

from unittest.mock import MagicMock

from ledgerlite.application.journal import Journal
from ledgerlite.application.use_cases.get_balance_report import (
    BalanceReportOptions,
    GetBalanceReportUseCase,
)
from ledgerlite.infrastructure.parser.parser import LedgerJournalParser

JOURNAL = """\
P 2024-01-15 AAPL $120

2024-01-01 Transfer in
    Assets:Bank:Checking    $5
    Assets:Bank:Savings     $3
    Income:Gift

2024-01-02 Buy shares
    Investments:Broker    1 AAPL @ $100
    Income:Gift          -$100

2024-01-03 Refund
    Expenses:Misc     $2
    Expenses:Misc    -$2
"""


def _build_use_case(logger=None) -> GetBalanceReportUseCase:
    journal = Journal(LedgerJournalParser(logger=MagicMock()), logger=MagicMock())
    journal.load_from_text(JOURNAL)
    return GetBalanceReportUseCase(journal, logger=logger or MagicMock())


def _rows(report) -> list[tuple[str, int, str]]:
    return [(row.full_name, row.depth, row.balance.format()) for row in report.rows]


def test_default_report_groups_siblings() -> None:
    """Siblings share a synthesized parent; zero accounts are hidden."""
    report = _build_use_case().execute()

    assert _rows(report) == [
        ("Assets:Bank", 1, "$8"),
        ("Assets:Bank:Checking", 2, "$5"),
        ("Assets:Bank:Savings", 2, "$3"),
        ("Income:Gift", 1, "-$108"),
        ("Investments:Broker", 1, "1 AAPL"),
    ]
    assert report.total.format() == "-$100, 1 AAPL"


def test_show_empty_keeps_zero_accounts() -> None:
    """-E shows accounts whose balance is zero."""
    report = _build_use_case().execute(BalanceReportOptions(show_empty=True))

    assert ("Expenses:Misc", 1, "0") in _rows(report)


def test_patterns_limit_rows_and_total() -> None:
    """The total covers only the accounts in scope."""
    report = _build_use_case().execute(BalanceReportOptions(patterns=("bank",)))

    assert [row.full_name for row in report.rows] == [
        "Assets:Bank",
        "Assets:Bank:Checking",
        "Assets:Bank:Savings",
    ]
    assert report.total.format() == "$8"


def test_no_total_and_empty_reports() -> None:
    """The total is omitted on request and when nothing is shown."""
    use_case = _build_use_case()

    assert use_case.execute(BalanceReportOptions(no_total=True)).total is None
    empty = use_case.execute(BalanceReportOptions(patterns=("nothing",)))
    assert empty.rows == []
    assert empty.total is None
    combined = use_case.execute(BalanceReportOptions(flat=True, no_rollup=True))
    assert combined.rows == []
    assert combined.total is None


def test_no_rollup_aggregates_top_level() -> None:
    """-n sums balances by top-level account."""
    report = _build_use_case().execute(BalanceReportOptions(no_rollup=True))

    assert _rows(report) == [
        ("Assets", 1, "$8"),
        ("Income", 1, "-$108"),
        ("Investments", 1, "1 AAPL"),
    ]


def test_exchange_converts_with_latest_price() -> None:
    """-X values commodities in the target using the latest price."""
    report = _build_use_case().execute(
        BalanceReportOptions(flat=True, exchange="$")
    )

    assert ("Investments:Broker", 1, "$120") in _rows(report)
    assert report.total.format() == "$20"


def test_unknown_exchange_commodity_is_logged() -> None:
    """An unknown exchange commodity leaves balances untouched."""
    logger = MagicMock()
    report = _build_use_case(logger=logger).execute(
        BalanceReportOptions(flat=True, exchange="GBP")
    )

    assert ("Investments:Broker", 1, "1 AAPL") in _rows(report)
    logger.warning.assert_called_once()
