"""Text rendering of register entries."""

from ledgerlite.application.use_cases.show_register import RegisterEntry

DATE_WIDTH = 10
PAYEE_WIDTH = 22
ACCOUNT_WIDTH = 22
AMOUNT_WIDTH = 12


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 2] + ".."


def present_register(entries: list[RegisterEntry]) -> str:
    """Render entries as date, payee, account, amount and running total.

    Date and payee appear only on the first posting of each transaction.
    Extra commodities of the running total continue on padded lines.
    """
    lines = []
    blank_prefix = " " * (DATE_WIDTH + PAYEE_WIDTH + ACCOUNT_WIDTH + AMOUNT_WIDTH + 4)
    for entry in entries:
        if entry.first_of_transaction:
            date_text = f"{entry.date:%Y/%m/%d}"
            payee = _truncate(entry.payee, PAYEE_WIDTH)
        else:
            date_text = ""
            payee = ""
        amount = entry.amount.format() if entry.amount is not None else ""
        totals = [total.format() for total in entry.running_total] or ["0"]
        lines.append(
            f"{date_text:<{DATE_WIDTH}} {payee:<{PAYEE_WIDTH}} "
            f"{_truncate(entry.account, ACCOUNT_WIDTH):<{ACCOUNT_WIDTH}} "
            f"{amount:>{AMOUNT_WIDTH}} {totals[0]:>{AMOUNT_WIDTH}}"
        )
        for extra in totals[1:]:
            lines.append(f"{blank_prefix}{extra:>{AMOUNT_WIDTH}}")
    return "\n".join(lines) + "\n" if lines else ""


__all__ = ["present_register"]
