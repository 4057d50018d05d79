"""
Journal entry service — the double-entry rules.

Every entry accepted here satisfies:
1. Description and reference number are present
2. At least two lines
3. Each line has an account code, non-negative amounts, and is
   either a debit or a credit, never both
4. Total debits equal total credits (within BALANCE_TOLERANCE)

The rules are checked once, at creation. After that only the
description of a draft can change, so the balance cannot drift.
Posting is one-way: posted entries can be neither updated nor
deleted.
"""

import logging
from datetime import datetime
from decimal import Decimal

from ledgerx.clock import as_naive_utc, utcnow
from ledgerx.exceptions import BalanceError, StateError, ValidationError
from ledgerx.models.base import new_id
from ledgerx.models.journal_entry import JournalEntry, JournalLine
from ledgerx.repositories.base import LedgerStore
from ledgerx.schemas.journal_entry import (
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalLineCreate,
)

logger = logging.getLogger(__name__)

# Debits and credits may differ by at most one cent
BALANCE_TOLERANCE = Decimal("0.01")

MIN_LINES = 2


def validate_lines(lines: list[JournalLineCreate]) -> tuple[Decimal, Decimal]:
    """
    Check the per-line rules and the balance rule.

    Returns (total_debits, total_credits). Raises ValidationError
    for a bad line, BalanceError if the totals do not match.
    """
    if len(lines) < MIN_LINES:
        raise ValidationError(
            "Journal entry must have at least 2 lines (debit and credit)"
        )

    for line in lines:
        if not line.account_code.strip():
            raise ValidationError("Account code is required for each journal line")
        if line.debit_amount < 0 or line.credit_amount < 0:
            raise ValidationError("Debit and credit amounts must be non-negative")
        if line.debit_amount > 0 and line.credit_amount > 0:
            raise ValidationError(
                "A journal line cannot have both debit and credit amounts"
            )

    total_debits = sum((line.debit_amount for line in lines), Decimal("0"))
    total_credits = sum((line.credit_amount for line in lines), Decimal("0"))

    if abs(total_debits - total_credits) > BALANCE_TOLERANCE:
        raise BalanceError(total_debits, total_credits)

    return total_debits, total_credits


class JournalEntryService:

    def __init__(self, store: LedgerStore):
        self.store = store
        self.entries = store.journal_entries

    def get_all_entries(self) -> list[JournalEntry]:
        logger.info("Retrieving all journal entries")
        return self.entries.get_all()

    def get_entry(self, entry_id: str) -> JournalEntry | None:
        if not entry_id or not entry_id.strip():
            logger.warning("get_entry called with empty id")
            return None

        entry = self.entries.get_by_id(entry_id)
        if entry is None:
            logger.warning("Journal entry with id %s not found", entry_id)
        return entry

    def get_posted_entries(self) -> list[JournalEntry]:
        logger.info("Retrieving posted journal entries")
        return self.entries.get_posted()

    def get_entries_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[JournalEntry]:
        """Entries dated within [start_date, end_date], both inclusive."""
        start_date = as_naive_utc(start_date)
        end_date = as_naive_utc(end_date)

        if start_date > end_date:
            logger.warning(
                "Invalid date range: start %s is after end %s",
                start_date, end_date,
            )
            raise ValidationError("Start date must be less than or equal to end date")

        logger.info(
            "Retrieving journal entries between %s and %s", start_date, end_date
        )
        return self.entries.get_by_date_range(start_date, end_date)

    def create_journal_entry(self, request: JournalEntryCreate) -> JournalEntry:
        """
        Validate and store a new draft entry.

        Nothing is written unless every rule passes.
        """
        if not request.description.strip():
            raise ValidationError("Journal entry description is required")
        if not request.reference_number.strip():
            raise ValidationError("Journal entry reference number is required")

        total_debits, _ = validate_lines(request.lines)

        now = utcnow()
        entry = JournalEntry(
            id=new_id(),
            description=request.description,
            reference_number=request.reference_number,
            entry_date=as_naive_utc(request.entry_date) or now,
            is_posted=False,
            created_at=now,
            lines=[
                JournalLine(
                    id=new_id(),
                    position=position,
                    account_id=line.account_id,
                    account_code=line.account_code,
                    debit_amount=line.debit_amount,
                    credit_amount=line.credit_amount,
                    narration=line.narration,
                )
                for position, line in enumerate(request.lines)
            ],
        )
        entry = self.entries.add(entry)
        logger.info(
            "Journal entry %s created with id %s (total %s)",
            entry.reference_number, entry.id, total_debits,
        )
        return entry

    def update_journal_entry(
        self, entry_id: str, request: JournalEntryUpdate
    ) -> JournalEntry | None:
        """
        Change the description of a draft entry.

        Returns None for an unknown id; raises StateError if the
        entry is already posted. A blank description is no change.
        """
        entry = self.entries.get_by_id(entry_id)
        if entry is None:
            logger.warning("Cannot update: journal entry %s not found", entry_id)
            return None

        if entry.is_posted:
            logger.warning("Cannot update posted journal entry %s", entry_id)
            raise StateError("Cannot update a posted journal entry")

        if request.description and request.description.strip():
            entry.description = request.description

        entry = self.entries.update(entry)
        logger.info("Journal entry %s updated", entry_id)
        return entry

    def post_journal_entry(self, entry_id: str) -> bool:
        """
        Move a draft to posted.

        Returns False, rather than raising, when the entry is
        unknown or already posted, so posting twice is harmless.
        """
        entry = self.entries.get_by_id(entry_id)
        if entry is None:
            logger.warning("Cannot post: journal entry %s not found", entry_id)
            return False

        if entry.is_posted:
            logger.warning("Journal entry %s is already posted", entry_id)
            return False

        entry.is_posted = True
        self.entries.update(entry)
        logger.info("Journal entry %s posted", entry_id)
        return True

    def delete_journal_entry(self, entry_id: str) -> bool:
        """
        Delete a draft entry. Returns False for an unknown id;
        raises StateError for a posted entry.
        """
        entry = self.entries.get_by_id(entry_id)
        if entry is None:
            logger.warning("Cannot delete: journal entry %s not found", entry_id)
            return False

        if entry.is_posted:
            logger.warning("Cannot delete posted journal entry %s", entry_id)
            raise StateError("Cannot delete a posted journal entry")

        deleted = self.entries.delete(entry_id)
        if deleted:
            logger.info("Journal entry %s deleted", entry_id)
        return deleted
