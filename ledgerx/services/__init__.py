"""Business logic services."""

from ledgerx.services.account_service import AccountService
from ledgerx.services.journal_entry_service import JournalEntryService
from ledgerx.services.report_service import ReportService
from ledgerx.services.ledger_key_service import LedgerKeyService

__all__ = [
    "AccountService",
    "JournalEntryService",
    "ReportService",
    "LedgerKeyService",
]
