"""Line classification and transaction header parsing."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from ledgerlite.domain.models import TransactionStatus

DATE_SHAPE_RE = re.compile(r"^\d{4}[-/]\d{2}[-/]\d{2}$")
_NOTE_SPLIT_RE = re.compile(r"(?:^|\s);")

COMMENT_PREFIXES = (";", "#", "%", "|", "*")
DIRECTIVE_KEYWORDS = ("account", "commodity", "P")


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    HEADER = "header"
    POSTING = "posting"
    DIRECTIVE = "directive"
    OTHER = "other"


@dataclass(frozen=True)
class TransactionHeader:
    """Fields of a ``DATE[=AUX] [*|!] [(CODE)] PAYEE [; NOTE]`` line."""

    date: date
    status: TransactionStatus
    payee: str
    aux_date: date | None = None
    code: str | None = None
    note: str | None = None


def is_indented(line: str) -> bool:
    return line[:1] in (" ", "\t")


def looks_like_date(text: str) -> bool:
    """Return True when ``text`` has the ``YYYY-MM-DD`` or ``YYYY/MM/DD`` shape."""
    return bool(DATE_SHAPE_RE.match(text))


def parse_date(text: str) -> date:
    """Parse a journal date.

    Args:
        text: Date using ``-`` or ``/`` separators.

    Returns:
        date: Parsed calendar date.

    Raises:
        ValueError: If the text is not a valid calendar date.
    """
    if not looks_like_date(text):
        raise ValueError(f"invalid date format: {text}")
    try:
        return datetime.strptime(text.replace("/", "-"), "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValueError(f"invalid date: {text}") from exc


def classify_line(line: str) -> LineKind:
    """Return the kind of a raw journal line."""
    if not line.strip():
        return LineKind.BLANK
    if is_indented(line):
        if line.lstrip().startswith(";"):
            return LineKind.COMMENT
        return LineKind.POSTING
    if line.startswith(COMMENT_PREFIXES):
        return LineKind.COMMENT
    if looks_like_date(line[:10]):
        return LineKind.HEADER
    if line.split(maxsplit=1)[0] in DIRECTIVE_KEYWORDS:
        return LineKind.DIRECTIVE
    return LineKind.OTHER


def split_note(text: str) -> tuple[str, str | None]:
    """Split ``text ; note`` into its body and optional note."""
    match = _NOTE_SPLIT_RE.search(text)
    if match is None:
        return text.strip(), None
    body = text[: match.start()].strip()
    note = text[match.end() :].strip()
    return body, note


def parse_header(line: str) -> TransactionHeader:
    """Parse a transaction header line.

    Raises:
        ValueError: If the primary or auxiliary date is invalid.
    """
    primary = parse_date(line[:10])
    rest = line[10:]
    aux_date = None
    if rest.startswith("="):
        aux_date = parse_date(rest[1:11])
        rest = rest[11:]

    body, note = split_note(rest)
    status = TransactionStatus.PENDING
    if body[:1] in ("*", "!"):
        status = TransactionStatus.from_marker(body[0])
        body = body[1:].lstrip()

    code = None
    if body.startswith("("):
        close = body.find(")")
        if close > 0:
            code = body[1:close].strip()
            body = body[close + 1 :].lstrip()

    return TransactionHeader(
        date=primary,
        status=status,
        payee=body,
        aux_date=aux_date,
        code=code,
        note=note,
    )


__all__ = [
    "LineKind",
    "TransactionHeader",
    "classify_line",
    "is_indented",
    "looks_like_date",
    "parse_date",
    "parse_header",
    "split_note",
]
