"""SQLAlchemy engines for journal exports.

Exports usually land in a local SQLite file, so SQLite URLs get their
parent directory created and SQLAlchemy's default pooling. Server URLs
(PostgreSQL and friends) get a small ``QueuePool`` with pre-ping. Engines
are cached per URL for the life of the process.
"""

import os
from pathlib import Path

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from ledgerlite.application.ports.database import DatabaseEnginePort

EXPORT_DB_URL_VAR = "LEDGER_EXPORT_DB_URL"

_engines: dict[str, Engine] = {}


def resolve_export_url(db_url: str | None = None) -> str:
    """Return the export database URL.

    Args:
        db_url: URL given on the command line; wins over the environment.

    Returns:
        str: ``db_url`` or the value of ``LEDGER_EXPORT_DB_URL``.

    Raises:
        RuntimeError: If neither is set.
    """
    if db_url:
        return db_url
    dotenv.load_dotenv()
    value = os.getenv(EXPORT_DB_URL_VAR)
    if not value:
        raise RuntimeError(
            f"No export database: pass --db-url or set {EXPORT_DB_URL_VAR}"
        )
    return value


def _create_engine(db_url: str) -> Engine:
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).expanduser().parent.mkdir(
                parents=True,
                exist_ok=True,
            )
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def get_export_engine(db_url: str | None = None) -> Engine:
    """Return the cached engine for an export database.

    Args:
        db_url: Explicit URL, or None to read ``LEDGER_EXPORT_DB_URL``.

    Returns:
        Engine: One engine per resolved URL.
    """
    resolved = resolve_export_url(db_url)
    engine = _engines.get(resolved)
    if engine is None:
        engine = _create_engine(resolved)
        _engines[resolved] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort over the per-URL engine cache."""

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_export_engine(self) -> Engine:
        return get_export_engine(self._db_url)


__all__ = [
    "resolve_export_url",
    "get_export_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
