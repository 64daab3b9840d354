"""Tests for the filesystem journal source."""

from unittest.mock import MagicMock

import pytest

from ledgerlite.domain.errors import JournalSourceError
from ledgerlite.infrastructure.journal_source import FileJournalSource


def test_read_text_returns_contents(tmp_path) -> None:
    """An existing UTF-8 file should be returned as text."""
    journal = tmp_path / "main.ledger"
    journal.write_text("2024-01-01 Café\n", encoding="utf-8")
    logger = MagicMock()

    text = FileJournalSource(logger=logger).read_text(journal)

    assert text == "2024-01-01 Café\n"
    logger.info.assert_called_once()


def test_read_text_reports_missing_file(tmp_path) -> None:
    """A missing file should raise JournalSourceError with the path."""
    logger = MagicMock()
    missing = tmp_path / "missing.ledger"

    with pytest.raises(JournalSourceError) as exc:
        FileJournalSource(logger=logger).read_text(str(missing))

    assert exc.value.path == missing
    assert "missing.ledger" in str(exc.value)
    assert isinstance(exc.value.cause, OSError)
    logger.error.assert_called_once()


def test_read_text_rejects_invalid_utf8(tmp_path) -> None:
    """Undecodable bytes are reported like I/O errors."""
    journal = tmp_path / "latin1.ledger"
    journal.write_bytes(b"2024-01-01 Caf\xe9\n")

    with pytest.raises(JournalSourceError):
        FileJournalSource(logger=MagicMock()).read_text(journal)
