"""Command-line entry point for ledgerlite.

This module parses arguments, loads the journal through the composition
root and dispatches to one use case per command. Presenters turn the use
case results into text written to stdout.
"""

import argparse
import sys

from ledgerlite.adapters.presenters.balance_presenter import (
    present_balance_report,
)
from ledgerlite.adapters.presenters.register_presenter import present_register
from ledgerlite.adapters.presenters.summary_presenter import (
    present_lines,
    present_prices,
    present_stats,
)
from ledgerlite.adapters.presenters.transaction_presenter import (
    DATES_ACTUAL,
    DATES_AUX,
    DATES_BOTH,
    present_transactions,
)
from ledgerlite.application.journal import Journal
from ledgerlite.application.use_cases.build_equity import BuildEquityUseCase
from ledgerlite.application.use_cases.export_journal import (
    ExportJournalUseCase,
)
from ledgerlite.application.use_cases.get_balance_report import (
    BalanceReportOptions,
    GetBalanceReportUseCase,
)
from ledgerlite.application.use_cases.get_stats import GetStatsUseCase
from ledgerlite.application.use_cases.list_prices import ListPricesUseCase
from ledgerlite.application.use_cases.listings import (
    ListAccountsUseCase,
    ListCommoditiesUseCase,
    ListPayeesUseCase,
)
from ledgerlite.application.use_cases.select_transactions import (
    SelectTransactionsUseCase,
)
from ledgerlite.application.use_cases.show_register import ShowRegisterUseCase
from ledgerlite.domain.errors import LedgerError
from ledgerlite.infrastructure.container import (
    build_database_adapter,
    build_journal_store,
    load_journal,
)
from ledgerlite.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from ledgerlite.infrastructure.settings import LedgerSettings


def _first(patterns: list[str]) -> str | None:
    return patterns[0] if patterns else None


def _run_balance(journal: Journal, args, settings: LedgerSettings) -> str:
    options = BalanceReportOptions(
        flat=args.flat,
        no_total=args.no_total,
        show_empty=args.empty,
        no_rollup=args.no_rollup,
        exchange=args.exchange,
        patterns=tuple(args.patterns),
    )
    report = GetBalanceReportUseCase(journal, logger=get_app_logger()).execute(
        options
    )
    return present_balance_report(report, flat=args.flat)


def _run_register(journal: Journal, args, settings: LedgerSettings) -> str:
    entries = ShowRegisterUseCase(journal).execute(tuple(args.patterns))
    return present_register(entries)


def _run_print(journal: Journal, args, settings: LedgerSettings) -> str:
    transactions = SelectTransactionsUseCase(journal).execute(
        tuple(args.patterns)
    )
    return present_transactions(
        transactions,
        dates=args.dates,
        decimal_comma=args.decimal_comma,
    )


def _run_accounts(journal: Journal, args, settings: LedgerSettings) -> str:
    return present_lines(ListAccountsUseCase(journal).execute(_first(args.patterns)))


def _run_payees(journal: Journal, args, settings: LedgerSettings) -> str:
    return present_lines(ListPayeesUseCase(journal).execute(_first(args.patterns)))


def _run_commodities(journal: Journal, args, settings: LedgerSettings) -> str:
    return present_lines(
        ListCommoditiesUseCase(journal).execute(_first(args.patterns))
    )


def _run_stats(journal: Journal, args, settings: LedgerSettings) -> str:
    return present_stats(GetStatsUseCase(journal).execute())


def _run_equity(journal: Journal, args, settings: LedgerSettings) -> str:
    transaction = BuildEquityUseCase(journal).execute(_first(args.patterns))
    return present_transactions([transaction])


def _run_prices(journal: Journal, args, settings: LedgerSettings) -> str:
    return present_prices(ListPricesUseCase(journal).execute(_first(args.patterns)))


def _run_export(journal: Journal, args, settings: LedgerSettings) -> str:
    db_port = build_database_adapter(args.db_url or settings.export_db_url)
    store = build_journal_store(db_port)
    result = ExportJournalUseCase(journal, store, logger=get_app_logger()).run()
    return (
        f"Exported {result.transaction_count} transactions, "
        f"{result.posting_count} postings and {result.price_count} prices.\n"
    )


def _add_patterns(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "patterns",
        nargs="*",
        help="Case-insensitive account (or payee/commodity) substrings.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for every command."""
    parser = argparse.ArgumentParser(
        prog="ledgerlite",
        description="Report on a plain-text double-entry journal.",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Journal file (defaults to LEDGER_FILE).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance = subparsers.add_parser(
        "balance",
        aliases=["bal"],
        help="Show account balances.",
    )
    balance.add_argument("--flat", action="store_true")
    balance.add_argument("--no-total", action="store_true")
    balance.add_argument("-E", "--empty", action="store_true")
    balance.add_argument("-n", "--no-rollup", action="store_true")
    balance.add_argument("-X", "--exchange", metavar="COMMODITY")
    _add_patterns(balance)
    balance.set_defaults(handler=_run_balance)

    register = subparsers.add_parser(
        "register",
        aliases=["reg", "r"],
        help="Show postings with a running total.",
    )
    _add_patterns(register)
    register.set_defaults(handler=_run_register)

    print_command = subparsers.add_parser(
        "print",
        help="Print transactions in journal format.",
    )
    dates = print_command.add_mutually_exclusive_group()
    dates.add_argument(
        "--actual",
        dest="dates",
        action="store_const",
        const=DATES_ACTUAL,
        help="Print only the primary date of each transaction.",
    )
    dates.add_argument(
        "--aux-date",
        dest="dates",
        action="store_const",
        const=DATES_AUX,
        help="Print the auxiliary date where a transaction has one.",
    )
    print_command.add_argument(
        "--decimal-comma",
        action="store_true",
        help="Write amounts with a decimal comma.",
    )
    print_command.set_defaults(handler=_run_print, dates=DATES_BOTH)
    _add_patterns(print_command)

    simple_commands = (
        ("accounts", _run_accounts, "List accounts."),
        ("payees", _run_payees, "List payees."),
        ("commodities", _run_commodities, "List commodities."),
        ("stats", _run_stats, "Show journal statistics."),
        ("equity", _run_equity, "Print an opening balances transaction."),
        ("prices", _run_prices, "List price points."),
    )
    for name, handler, help_text in simple_commands:
        command = subparsers.add_parser(name, help=help_text)
        _add_patterns(command)
        command.set_defaults(handler=handler)

    export = subparsers.add_parser(
        "export",
        help="Export the journal into a SQL database.",
    )
    export.add_argument(
        "--db-url",
        help="SQLAlchemy URL (defaults to LEDGER_EXPORT_DB_URL).",
    )
    export.set_defaults(handler=_run_export)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one ledgerlite command.

    Args:
        argv: Arguments without the program name; defaults to sys.argv.

    Returns:
        int: 0 on success, 1 when the journal cannot be read or reported.
    """
    logger = get_app_logger()
    args = build_parser().parse_args(argv)
    get_usage_logger().info(f"Command {args.command} (file={args.file})")

    settings = LedgerSettings.from_env()
    path = args.file or settings.journal_file
    if path is None:
        print(
            "Error: no journal file given; use -f or set LEDGER_FILE",
            file=sys.stderr,
        )
        return 1

    try:
        journal = load_journal(path, settings=settings)
        output = args.handler(journal, args, settings)
    except (LedgerError, RuntimeError) as exc:
        logger.error(f"Command {args.command} failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
