"""Port for reading journal text."""

from pathlib import Path
from typing import Protocol


class JournalSourcePort(Protocol):
    """Port exposing read access to journal files."""

    def read_text(self, path: Path | str) -> str:
        """Return the full contents of a journal.

        Raises:
            JournalSourceError: If the journal cannot be read.
        """


__all__ = ["JournalSourcePort"]
