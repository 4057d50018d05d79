"""
Repository interfaces.

Services only ever talk to these abstractions, so the in-memory
store and the SQLAlchemy store are interchangeable underneath the
validation and reporting logic.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, TypeVar

from ledgerx.models.account import Account
from ledgerx.models.journal_entry import JournalEntry
from ledgerx.models.ledger_key import LedgerKey

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Basic CRUD over entities keyed by a string id."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> T | None: ...

    @abstractmethod
    def get_all(self) -> list[T]:
        """Every entity, in creation order."""

    @abstractmethod
    def add(self, entity: T) -> T: ...

    @abstractmethod
    def update(self, entity: T) -> T: ...

    @abstractmethod
    def delete(self, entity_id: str) -> bool: ...

    @abstractmethod
    def exists(self, entity_id: str) -> bool: ...


class AccountRepository(Repository[Account]):

    @abstractmethod
    def get_by_code(self, code: str) -> Account | None: ...

    @abstractmethod
    def get_active(self) -> list[Account]: ...


class JournalEntryRepository(Repository[JournalEntry]):

    @abstractmethod
    def get_posted(self) -> list[JournalEntry]: ...

    @abstractmethod
    def get_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[JournalEntry]:
        """Entries with start_date <= entry_date <= end_date, oldest first."""


class LedgerKeyRepository(Repository[LedgerKey]):

    @abstractmethod
    def get_active(self, now: datetime) -> list[LedgerKey]:
        """Active keys that have no expiry or expire after now."""

    @abstractmethod
    def get_expired(self, now: datetime) -> list[LedgerKey]:
        """Keys with an expiry at or before now, active or not."""


class LedgerStore(ABC):
    """
    The three repositories plus a transaction boundary.

    The API layer calls commit() after a successful operation and
    rollback() after a failed one.
    """

    accounts: AccountRepository
    journal_entries: JournalEntryRepository
    ledger_keys: LedgerKeyRepository

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
