"""SQLAlchemy adapter storing exported journals."""

from dataclasses import asdict
from datetime import date
from decimal import Decimal

from sqlalchemy import text

from ledgerlite.application.ports.database import DatabaseEnginePort
from ledgerlite.application.ports.journal_store import (
    JournalStorePort,
    PostingRecord,
    PriceRecord,
    TransactionRecord,
)
from ledgerlite.infrastructure.logging.logger import get_app_logger

CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS ledger_transactions (
        transaction_id INTEGER PRIMARY KEY,
        date TEXT NOT NULL,
        aux_date TEXT,
        status TEXT NOT NULL,
        code TEXT,
        payee TEXT,
        note TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS ledger_postings (
        transaction_id INTEGER NOT NULL,
        position INTEGER NOT NULL,
        account TEXT NOT NULL,
        amount TEXT,
        commodity TEXT,
        posting_type TEXT NOT NULL,
        is_generated INTEGER NOT NULL,
        note TEXT,
        PRIMARY KEY (transaction_id, position)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS ledger_prices (
        date TEXT NOT NULL,
        commodity TEXT NOT NULL,
        price TEXT NOT NULL,
        quote_commodity TEXT NOT NULL
    )
    """,
)

DELETE_SQL = (
    "DELETE FROM ledger_postings",
    "DELETE FROM ledger_transactions",
    "DELETE FROM ledger_prices",
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO ledger_transactions (
        transaction_id, date, aux_date, status, code, payee, note
    )
    VALUES (
        :transaction_id, :date, :aux_date, :status, :code, :payee, :note
    )
    """
)

INSERT_POSTING_SQL = text(
    """
    INSERT INTO ledger_postings (
        transaction_id,
        position,
        account,
        amount,
        commodity,
        posting_type,
        is_generated,
        note
    )
    VALUES (
        :transaction_id,
        :position,
        :account,
        :amount,
        :commodity,
        :posting_type,
        :is_generated,
        :note
    )
    """
)

INSERT_PRICE_SQL = text(
    """
    INSERT INTO ledger_prices (date, commodity, price, quote_commodity)
    VALUES (:date, :commodity, :price, :quote_commodity)
    """
)


def _to_row(record) -> dict:
    """Convert a record to bind parameters every SQL driver accepts."""
    row = asdict(record)
    for key, value in row.items():
        if isinstance(value, Decimal):
            row[key] = str(value)
        elif isinstance(value, date):
            row[key] = value.isoformat()
        elif isinstance(value, bool):
            row[key] = int(value)
    return row


class SqlAlchemyJournalStore(JournalStorePort):
    """Journal storage backed by a SQL database."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the export engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare_destination(self) -> None:
        """Create the export tables if they do not exist."""
        engine = self._db_port.get_export_engine()
        with engine.begin() as conn:
            for statement in CREATE_TABLES_SQL:
                conn.exec_driver_sql(statement)

    def replace_journal(
        self,
        transactions: list[TransactionRecord],
        postings: list[PostingRecord],
        prices: list[PriceRecord],
    ) -> int:
        """Replace stored rows in one database transaction.

        Returns:
            int: Number of posting rows inserted.
        """
        engine = self._db_port.get_export_engine()
        with engine.begin() as conn:
            for statement in DELETE_SQL:
                conn.exec_driver_sql(statement)
            if transactions:
                conn.execute(
                    INSERT_TRANSACTION_SQL,
                    [_to_row(record) for record in transactions],
                )
            if postings:
                conn.execute(
                    INSERT_POSTING_SQL,
                    [_to_row(record) for record in postings],
                )
            if prices:
                conn.execute(
                    INSERT_PRICE_SQL,
                    [_to_row(record) for record in prices],
                )

        self._logger.info(
            f"Stored {len(transactions)} transactions and "
            f"{len(postings)} postings"
        )
        return len(postings)


__all__ = ["SqlAlchemyJournalStore"]
