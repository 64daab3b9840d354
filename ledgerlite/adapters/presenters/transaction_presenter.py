"""Ledger-format rendering of transactions for print and equity."""

from ledgerlite.domain.models import Amount, Posting, PostingType, Transaction

POSTING_INDENT = "    "
AMOUNT_COLUMN = 48

DATES_BOTH = "both"
DATES_ACTUAL = "actual"
DATES_AUX = "aux"

_DECIMAL_COMMA = str.maketrans(".,", ",.")


def _metadata_lines(metadata: dict[str, str], indent: str) -> list[str]:
    lines = []
    for key, value in metadata.items():
        if value:
            lines.append(f"{indent}; {key}: {value}")
        else:
            lines.append(f"{indent}; :{key}:")
    return lines


def _account_label(posting: Posting) -> str:
    name = posting.account.full_name
    if posting.posting_type is PostingType.VIRTUAL:
        name = f"({name})"
    elif posting.posting_type is PostingType.BRACKETED:
        name = f"[{name}]"
    if posting.status is not None and posting.status.marker:
        name = f"{posting.status.marker} {name}"
    return name


def _amount_text(amount: Amount, decimal_comma: bool = False) -> str:
    text = amount.format()
    return text.translate(_DECIMAL_COMMA) if decimal_comma else text


def _annotations(posting: Posting, decimal_comma: bool = False) -> str:
    parts = []
    if posting.cost is not None:
        cost = _amount_text(posting.cost.amount, decimal_comma)
        parts.append(f"{{{{{cost}}}}}" if posting.cost.is_total else f"{{{cost}}}")
    if posting.price is not None:
        marker = "@@" if posting.price.is_total else "@"
        price = _amount_text(posting.price.amount, decimal_comma)
        parts.append(f"{marker} {price}")
    if posting.balance_assertion is not None:
        marker = "=" if posting.balance_assertion.is_assignment else "=="
        assertion = _amount_text(posting.balance_assertion.amount, decimal_comma)
        parts.append(f"{marker} {assertion}")
    return " ".join(parts)


def format_posting(posting: Posting, decimal_comma: bool = False) -> str:
    """Render one posting line; generated amounts are left out."""
    label = _account_label(posting)
    amount = ""
    if posting.amount is not None and not posting.is_generated:
        amount = _amount_text(posting.amount, decimal_comma)
    annotations = _annotations(posting, decimal_comma)

    line = f"{POSTING_INDENT}{label}"
    if amount:
        gap = max(2, AMOUNT_COLUMN - len(line) - len(amount))
        line = f"{line}{' ' * gap}{amount}"
    if annotations:
        line = f"{line}{' ' if amount else '  '}{annotations}"
    if posting.note:
        line = f"{line}  ; {posting.note}"
    return line


def _header_date(transaction: Transaction, dates: str) -> str:
    aux_date = transaction.aux_date
    if aux_date is None or dates == DATES_ACTUAL:
        return f"{transaction.date:%Y/%m/%d}"
    if dates == DATES_AUX:
        return f"{aux_date:%Y/%m/%d}"
    return f"{transaction.date:%Y/%m/%d}={aux_date:%Y/%m/%d}"


def format_transaction(
    transaction: Transaction,
    dates: str = DATES_BOTH,
    decimal_comma: bool = False,
) -> str:
    """Render a transaction as journal text.

    Args:
        transaction: Transaction to render.
        dates: ``both`` writes ``DATE=AUX``, ``actual`` only the primary
            date and ``aux`` the auxiliary date where one exists.
        decimal_comma: Swap decimal points and digit-group commas.
    """
    header = _header_date(transaction, dates)
    if transaction.status.marker:
        header += f" {transaction.status.marker}"
    if transaction.code:
        header += f" ({transaction.code})"
    if transaction.payee:
        header += f" {transaction.payee}"
    if transaction.note:
        header += f"  ; {transaction.note}"

    lines = [header]
    lines.extend(_metadata_lines(transaction.metadata, POSTING_INDENT))
    for posting in transaction.postings:
        lines.append(format_posting(posting, decimal_comma))
        lines.extend(
            _metadata_lines(posting.metadata, POSTING_INDENT * 2)
        )
    return "\n".join(lines)


def present_transactions(
    transactions: list[Transaction],
    dates: str = DATES_BOTH,
    decimal_comma: bool = False,
) -> str:
    """Render transactions separated by blank lines."""
    if not transactions:
        return ""
    blocks = [
        format_transaction(txn, dates=dates, decimal_comma=decimal_comma)
        for txn in transactions
    ]
    return "\n\n".join(blocks) + "\n"


__all__ = [
    "DATES_ACTUAL",
    "DATES_AUX",
    "DATES_BOTH",
    "format_posting",
    "format_transaction",
    "present_transactions",
]
