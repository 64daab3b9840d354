"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from ledgerlite.domain.constants import DEFAULT_COMMODITY_SYMBOL
from ledgerlite.infrastructure.logging.logger import get_app_logger
from ledgerlite.utils.utils import get_project_root

JOURNAL_SUFFIXES = ("*.ledger", "*.journal", "*.dat")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for loading and exporting journals.

    Attributes:
        journal_file: Journal used when ``-f`` is not given.
        default_commodity: Symbol given to bare numbers.
        export_db_url: Database URL used by the export command.
    """

    journal_file: Optional[Path] = None
    default_commodity: str = DEFAULT_COMMODITY_SYMBOL
    export_db_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_file = os.getenv("LEDGER_FILE")
        if raw_file:
            journal_file = cls._normalize_path(raw_file, logger=logger)
        else:
            journal_file = cls._default_journal_file(logger=logger)
        default_commodity = (
            os.getenv("LEDGER_DEFAULT_COMMODITY", "").strip()
            or DEFAULT_COMMODITY_SYMBOL
        )
        export_db_url = os.getenv("LEDGER_EXPORT_DB_URL") or None
        return cls(
            journal_file=journal_file,
            default_commodity=default_commodity,
            export_db_url=export_db_url,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Expand and resolve a journal path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute journal path, which may not exist.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Journal file does not exist at {path}")
        return path

    @staticmethod
    def _default_journal_file(logger) -> Path | None:
        """Return the journal in data/ when exactly one is present.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single journal is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(
            path for pattern in JOURNAL_SUFFIXES for path in data_dir.glob(pattern)
        )
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple journal files found in data/. "
                "Set LEDGER_FILE to choose one."
            )
        return None


__all__ = ["LedgerSettings"]
