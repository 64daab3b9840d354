"""Application use cases package."""

from .build_equity import BuildEquityUseCase
from .export_journal import ExportJournalResult, ExportJournalUseCase
from .get_balance_report import (
    BalanceReport,
    BalanceReportOptions,
    GetBalanceReportUseCase,
)
from .get_stats import GetStatsUseCase, JournalStats
from .list_prices import ListPricesUseCase, PriceEntry
from .listings import (
    ListAccountsUseCase,
    ListCommoditiesUseCase,
    ListPayeesUseCase,
)
from .select_transactions import SelectTransactionsUseCase
from .show_register import RegisterEntry, ShowRegisterUseCase

__all__ = [
    "BuildEquityUseCase",
    "ExportJournalResult",
    "ExportJournalUseCase",
    "BalanceReport",
    "BalanceReportOptions",
    "GetBalanceReportUseCase",
    "GetStatsUseCase",
    "JournalStats",
    "ListPricesUseCase",
    "PriceEntry",
    "ListAccountsUseCase",
    "ListCommoditiesUseCase",
    "ListPayeesUseCase",
    "SelectTransactionsUseCase",
    "RegisterEntry",
    "ShowRegisterUseCase",
]
