"""Application ports package."""

from .database import DatabaseEnginePort
from .journal_parser import JournalParserPort, ParsedJournal
from .journal_source import JournalSourcePort
from .journal_store import (
    JournalStorePort,
    PostingRecord,
    PriceRecord,
    TransactionRecord,
)

__all__ = [
    "DatabaseEnginePort",
    "JournalParserPort",
    "ParsedJournal",
    "JournalSourcePort",
    "JournalStorePort",
    "PostingRecord",
    "PriceRecord",
    "TransactionRecord",
]
