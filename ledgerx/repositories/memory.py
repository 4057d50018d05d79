"""
In-memory repositories.

Each collection is a plain list scanned linearly, guarded by its
own lock so that a single repository call is atomic. Sequences of
calls made by a service (check the code is free, then insert) are
not: concurrent writers race and the last one wins.
"""

import logging
import threading
from datetime import datetime
from typing import TypeVar

from ledgerx.models.account import Account
from ledgerx.models.journal_entry import JournalEntry
from ledgerx.models.ledger_key import LedgerKey
from ledgerx.repositories.base import (
    AccountRepository,
    JournalEntryRepository,
    LedgerKeyRepository,
    LedgerStore,
    Repository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(Repository[T]):

    def __init__(self):
        self._data: list[T] = []
        self._lock = threading.Lock()

    def get_by_id(self, entity_id: str) -> T | None:
        with self._lock:
            return next((e for e in self._data if e.id == entity_id), None)

    def get_all(self) -> list[T]:
        with self._lock:
            return list(self._data)

    def add(self, entity: T) -> T:
        with self._lock:
            self._data.append(entity)
        return entity

    def update(self, entity: T) -> T:
        with self._lock:
            for index, existing in enumerate(self._data):
                if existing.id == entity.id:
                    self._data[index] = entity
                    break
        return entity

    def delete(self, entity_id: str) -> bool:
        with self._lock:
            for index, existing in enumerate(self._data):
                if existing.id == entity_id:
                    del self._data[index]
                    return True
        return False

    def exists(self, entity_id: str) -> bool:
        with self._lock:
            return any(e.id == entity_id for e in self._data)

    def _where(self, predicate) -> list[T]:
        with self._lock:
            return [e for e in self._data if predicate(e)]


class InMemoryAccountRepository(InMemoryRepository[Account], AccountRepository):

    def get_by_code(self, code: str) -> Account | None:
        matches = self._where(lambda a: a.code == code)
        return matches[0] if matches else None

    def get_active(self) -> list[Account]:
        return self._where(lambda a: a.is_active)


class InMemoryJournalEntryRepository(
    InMemoryRepository[JournalEntry], JournalEntryRepository
):

    def get_posted(self) -> list[JournalEntry]:
        return self._where(lambda e: e.is_posted)

    def get_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[JournalEntry]:
        found = self._where(lambda e: start_date <= e.entry_date <= end_date)
        return sorted(found, key=lambda e: e.entry_date)


class InMemoryLedgerKeyRepository(
    InMemoryRepository[LedgerKey], LedgerKeyRepository
):

    def get_active(self, now: datetime) -> list[LedgerKey]:
        return self._where(
            lambda k: k.is_active and (k.expires_at is None or k.expires_at > now)
        )

    def get_expired(self, now: datetime) -> list[LedgerKey]:
        return self._where(
            lambda k: k.expires_at is not None and k.expires_at <= now
        )


class InMemoryStore(LedgerStore):
    """
    Process-local store. Sample data, if wanted, is loaded once
    here at construction; there is no teardown.
    """

    def __init__(self, seed: bool = False):
        self.accounts = InMemoryAccountRepository()
        self.journal_entries = InMemoryJournalEntryRepository()
        self.ledger_keys = InMemoryLedgerKeyRepository()

        if seed:
            from ledgerx.repositories.seed import load_sample_data

            load_sample_data(self)
            logger.info("In-memory store seeded with sample data")

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass
