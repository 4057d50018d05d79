"""Storage backends behind the repository interfaces."""

from ledgerx.repositories.base import (
    AccountRepository,
    JournalEntryRepository,
    LedgerKeyRepository,
    LedgerStore,
)
from ledgerx.repositories.memory import InMemoryStore
from ledgerx.repositories.sql import SqlStore

__all__ = [
    "AccountRepository",
    "JournalEntryRepository",
    "LedgerKeyRepository",
    "LedgerStore",
    "InMemoryStore",
    "SqlStore",
]
