"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from ledgerlite.application.journal import Journal
from ledgerlite.application.ports.database import DatabaseEnginePort
from ledgerlite.application.ports.journal_parser import JournalParserPort
from ledgerlite.application.ports.journal_source import JournalSourcePort
from ledgerlite.application.ports.journal_store import JournalStorePort
from ledgerlite.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledgerlite.infrastructure.journal_source import FileJournalSource
from ledgerlite.infrastructure.journal_store import SqlAlchemyJournalStore
from ledgerlite.infrastructure.logging.logger import get_app_logger
from ledgerlite.infrastructure.parser.parser import LedgerJournalParser
from ledgerlite.infrastructure.settings import LedgerSettings


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url)


def build_journal_parser() -> JournalParserPort:
    """Return the journal text parser."""
    return LedgerJournalParser(logger=get_app_logger())


def build_journal_source() -> JournalSourcePort:
    """Return the journal file reader."""
    return FileJournalSource(logger=get_app_logger())


def build_journal_store(
    db_port: DatabaseEnginePort | None = None,
) -> JournalStorePort:
    """Return the export store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyJournalStore(resolved_db, logger=get_app_logger())


def build_journal(settings: LedgerSettings | None = None) -> Journal:
    """Return an empty journal configured from settings."""
    resolved = settings or LedgerSettings.from_env()
    return Journal(
        build_journal_parser(),
        default_commodity=resolved.default_commodity,
        logger=get_app_logger(),
    )


def load_journal(
    path: Path | str,
    settings: LedgerSettings | None = None,
    source: JournalSourcePort | None = None,
) -> Journal:
    """Read and parse the journal at ``path``.

    Raises:
        JournalSourceError: If the file cannot be read.
        JournalParseError: If its contents cannot be parsed.
    """
    journal = build_journal(settings)
    resolved_source = source or build_journal_source()
    journal.load_from_text(resolved_source.read_text(path))
    return journal


__all__ = [
    "build_database_adapter",
    "build_journal_parser",
    "build_journal_source",
    "build_journal_store",
    "build_journal",
    "load_journal",
]
