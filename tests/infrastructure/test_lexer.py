"""Tests for line classification and header parsing."""

from datetime import date

import pytest

from ledgerlite.domain.models import TransactionStatus
from ledgerlite.infrastructure.parser.lexer import (
    LineKind,
    classify_line,
    parse_date,
    parse_header,
    split_note,
)


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("", LineKind.BLANK),
        ("   ", LineKind.BLANK),
        ("; comment", LineKind.COMMENT),
        ("# comment", LineKind.COMMENT),
        ("* org heading", LineKind.COMMENT),
        ("2024-01-05 Grocer", LineKind.HEADER),
        ("2024/01/05", LineKind.HEADER),
        ("    Assets:Cash  $5", LineKind.POSTING),
        ("\tAssets:Cash", LineKind.POSTING),
        ("    ; posting note", LineKind.COMMENT),
        ("account Assets:Cash", LineKind.DIRECTIVE),
        ("P 2024-01-01 AAPL $100", LineKind.DIRECTIVE),
        ("include other.ledger", LineKind.OTHER),
        ("2024-1-5 Short", LineKind.OTHER),
    ],
)
def test_classify_line(line: str, kind: LineKind) -> None:
    """Each line should be classified by its leading characters."""
    assert classify_line(line) is kind


def test_parse_date_accepts_both_separators() -> None:
    """Dashes and slashes should both be accepted."""
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    assert parse_date("2024/02/29") == date(2024, 2, 29)


def test_parse_date_rejects_invalid_calendar_dates() -> None:
    """A date-shaped string that is not a real day is rejected."""
    with pytest.raises(ValueError, match="invalid date"):
        parse_date("2023-02-30")


def test_parse_header_reads_every_field() -> None:
    """The full header grammar should be parsed."""
    header = parse_header("2024-01-05=2024-01-07 ! (1042) Grocer  ; weekly")

    assert header.date == date(2024, 1, 5)
    assert header.aux_date == date(2024, 1, 7)
    assert header.status is TransactionStatus.RECONCILED
    assert header.code == "1042"
    assert header.payee == "Grocer"
    assert header.note == "weekly"


def test_parse_header_defaults() -> None:
    """A bare header is pending with no code or note."""
    header = parse_header("2024/01/05 * Opening balance")

    assert header.status is TransactionStatus.CLEARED
    assert header.payee == "Opening balance"
    assert header.code is None
    assert header.note is None


def test_split_note_needs_leading_space() -> None:
    """A semicolon inside a word is not a comment."""
    assert split_note("Assets:Cash  $5 ; lunch") == ("Assets:Cash  $5", "lunch")
    assert split_note("Foo;Bar") == ("Foo;Bar", None)
