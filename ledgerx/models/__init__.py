"""
Models package.

All models must be imported here so that Base.metadata knows
about every table before create_all() runs.
"""

from ledgerx.models.base import Base
from ledgerx.models.enums import AccountType
from ledgerx.models.account import Account
from ledgerx.models.journal_entry import JournalEntry, JournalLine
from ledgerx.models.ledger_key import LedgerKey

__all__ = [
    "Base",
    "AccountType",
    "Account",
    "JournalEntry",
    "JournalLine",
    "LedgerKey",
]
