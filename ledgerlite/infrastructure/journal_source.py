"""Filesystem adapter reading journal files."""

from pathlib import Path

from ledgerlite.application.ports.journal_source import JournalSourcePort
from ledgerlite.domain.errors import JournalSourceError
from ledgerlite.infrastructure.logging.logger import get_app_logger


class FileJournalSource(JournalSourcePort):
    """Read journals from the local filesystem as UTF-8 text."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def read_text(self, path: Path | str) -> str:
        """Return the contents of the journal at ``path``.

        Raises:
            JournalSourceError: If the file is missing or unreadable.
        """
        resolved = Path(path).expanduser()
        try:
            text = resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error(f"Failed to read journal {resolved}: {exc}")
            raise JournalSourceError(resolved, exc) from exc
        self._logger.info(f"Read {len(text)} characters from {resolved}")
        return text


__all__ = ["FileJournalSource"]
