"""
SQLAlchemy-backed repositories.

Each repository works inside the session it is given; nothing
here commits. The caller owns the transaction boundary, exactly
as with the in-memory store.
"""

import logging
from datetime import datetime

from sqlalchemy import select, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ledgerx.models.base import Base
from ledgerx.models.account import Account
from ledgerx.models.journal_entry import JournalEntry
from ledgerx.models.ledger_key import LedgerKey
from ledgerx.repositories.base import (
    AccountRepository,
    JournalEntryRepository,
    LedgerKeyRepository,
    LedgerStore,
)

logger = logging.getLogger(__name__)


class SqlRepository:
    """Shared CRUD for a single mapped class."""

    model: type
    ordering: tuple = ()

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, entity_id: str):
        if not entity_id:
            return None
        return self.db.get(self.model, entity_id)

    def get_all(self) -> list:
        entities = self.db.execute(
            select(self.model).order_by(*self.ordering)
        ).scalars().all()
        return list(entities)

    def add(self, entity):
        self.db.add(entity)
        self.db.flush()
        return entity

    def update(self, entity):
        entity = self.db.merge(entity)
        self.db.flush()
        return entity

    def delete(self, entity_id: str) -> bool:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.flush()
        return True

    def exists(self, entity_id: str) -> bool:
        return self.get_by_id(entity_id) is not None


class SqlAccountRepository(SqlRepository, AccountRepository):
    model = Account
    ordering = (Account.created_at, Account.code)

    def get_by_code(self, code: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.code == code)
        ).scalar_one_or_none()

    def get_active(self) -> list[Account]:
        accounts = self.db.execute(
            select(Account)
            .where(Account.is_active.is_(True))
            .order_by(*self.ordering)
        ).scalars().all()
        return list(accounts)


class SqlJournalEntryRepository(SqlRepository, JournalEntryRepository):
    model = JournalEntry
    ordering = (JournalEntry.created_at, JournalEntry.entry_date)

    def get_posted(self) -> list[JournalEntry]:
        entries = self.db.execute(
            select(JournalEntry)
            .where(JournalEntry.is_posted.is_(True))
            .order_by(*self.ordering)
        ).scalars().all()
        return list(entries)

    def get_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[JournalEntry]:
        entries = self.db.execute(
            select(JournalEntry).where(
                JournalEntry.entry_date >= start_date,
                JournalEntry.entry_date <= end_date,
            ).order_by(JournalEntry.entry_date, JournalEntry.created_at)
        ).scalars().all()
        return list(entries)


class SqlLedgerKeyRepository(SqlRepository, LedgerKeyRepository):
    model = LedgerKey
    ordering = (LedgerKey.created_at, LedgerKey.key_name)

    def get_active(self, now: datetime) -> list[LedgerKey]:
        keys = self.db.execute(
            select(LedgerKey).where(
                LedgerKey.is_active.is_(True),
                (LedgerKey.expires_at.is_(None)) | (LedgerKey.expires_at > now),
            ).order_by(*self.ordering)
        ).scalars().all()
        return list(keys)

    def get_expired(self, now: datetime) -> list[LedgerKey]:
        keys = self.db.execute(
            select(LedgerKey).where(
                LedgerKey.expires_at.is_not(None),
                LedgerKey.expires_at <= now,
            ).order_by(*self.ordering)
        ).scalars().all()
        return list(keys)


class SqlStore(LedgerStore):
    """All three repositories sharing one session."""

    def __init__(self, db: Session):
        self.db = db
        self.accounts = SqlAccountRepository(db)
        self.journal_entries = SqlJournalEntryRepository(db)
        self.ledger_keys = SqlLedgerKeyRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


def init_database(bind: Engine, db: Session, seed: bool = False) -> None:
    """
    Create missing tables and, if asked, load the sample data into
    an empty database.
    """
    Base.metadata.create_all(bind=bind)

    if not seed:
        return

    account_count = db.execute(select(func.count()).select_from(Account)).scalar()
    if account_count:
        return

    from ledgerx.repositories.seed import load_sample_data

    load_sample_data(SqlStore(db))
    db.commit()
    logger.info("Database seeded with sample data")
