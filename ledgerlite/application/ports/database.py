"""Database ports for journal export.

Infrastructure implementations provide the concrete engine so that use
cases never touch drivers or connection settings.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine used for exports."""

    def get_export_engine(self) -> Engine:
        """Get the engine for the export database.

        Returns:
            Engine: SQLAlchemy engine connected to the export database.
        """


__all__ = ["DatabaseEnginePort"]
