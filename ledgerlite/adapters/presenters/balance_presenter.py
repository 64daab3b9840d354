"""Text rendering of balance reports."""

from ledgerlite.application.use_cases.get_balance_report import BalanceReport
from ledgerlite.domain.models import Balance

AMOUNT_WIDTH = 20
INDENT = "  "


def _amount_lines(balance: Balance) -> list[str]:
    if balance.is_zero():
        return ["0"]
    return [amount.format() for amount in balance]


def _rows_for(balance: Balance, label: str) -> list[str]:
    """Right-align each commodity; the label goes on the last line."""
    amounts = _amount_lines(balance)
    lines = [f"{amount:>{AMOUNT_WIDTH}}" for amount in amounts[:-1]]
    last = f"{amounts[-1]:>{AMOUNT_WIDTH}}"
    lines.append(f"{last}  {label}" if label else last)
    return lines


def present_balance_report(report: BalanceReport, flat: bool = False) -> str:
    """Render rows as ``<amount>  <indent><name>`` plus the total line.

    Args:
        report: Report produced by GetBalanceReportUseCase.
        flat: Print full names without indentation.

    Returns:
        str: Report text, empty when the report has no rows.
    """
    lines: list[str] = []
    for row in report.rows:
        if flat:
            label = row.full_name
        else:
            label = f"{INDENT * (row.depth - 1)}{row.display_name}"
        lines.extend(_rows_for(row.balance, label))
    if report.total is not None:
        lines.append("-" * AMOUNT_WIDTH)
        lines.extend(_rows_for(report.total, ""))
    return "\n".join(lines) + "\n" if lines else ""


__all__ = ["present_balance_report"]
