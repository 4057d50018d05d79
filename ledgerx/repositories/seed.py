"""
Sample data loaded into a fresh store.

Entries are inserted directly, bypassing JournalEntryService, so
they can be marked posted from the start. Several lines reference
codes that are not in the chart (1010, 1000, 2000); reports still
pick them up.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from ledgerx.clock import utcnow
from ledgerx.models.account import Account
from ledgerx.models.base import new_id
from ledgerx.models.enums import AccountType
from ledgerx.models.journal_entry import JournalEntry, JournalLine
from ledgerx.models.ledger_key import LedgerKey
from ledgerx.repositories.base import LedgerStore
from ledgerx.services.ledger_key_service import generate_encryption_key

SAMPLE_ACCOUNTS = [
    ("10", "Cash", AccountType.ASSET, "50000"),
    ("130", "Bank Account", AccountType.ASSET, "100000"),
    ("1300", "Accounts Receivable", AccountType.ASSET, "25000"),
    ("2300", "Accounts Payable", AccountType.LIABILITY, "15000"),
    ("2100", "Short Term Loans", AccountType.LIABILITY, "30000"),
    ("3000", "Common Stock", AccountType.EQUITY, "100000"),
    ("3100", "Retained Earnings", AccountType.EQUITY, "60000"),
    ("4000", "Sales Revenue", AccountType.REVENUE, "200000"),
    ("5000", "Cost of Goods Sold", AccountType.EXPENSE, "80000"),
    ("5100", "Salary Expense", AccountType.EXPENSE, "40000"),
]

# (reference, description, entry date or None for "now", posted,
#  [(account code, account id, debit, credit, narration), ...])
SAMPLE_ENTRIES = [
    ("JE-001", "Initial cash deposit", datetime(2024, 1, 1), True, [
        ("1010", "1", "50000", "0", "Debit Bank"),
        ("3000", "2", "0", "50000", "Credit Common Stock"),
    ]),
    ("JE-002", "Sales transaction", datetime(2024, 1, 5), True, [
        ("1000", "1", "25000", "0", "Debit Cash"),
        ("4000", "3", "0", "25000", "Credit Sales Revenue"),
    ]),
    ("JE-003", "Purchase inventory on credit", datetime(2024, 1, 10), True, [
        ("5000", "4", "10000", "0", "Debit COGS"),
        ("2000", "5", "0", "10000", "Credit Accounts Payable"),
    ]),
    ("JE-004", "Pending salary payment", None, False, [
        ("5100", "6", "5000", "0", "Debit Salary Expense"),
        ("2100", "7", "0", "5000", "Credit Short Term Loans"),
    ]),
]


def load_sample_data(store: LedgerStore) -> None:
    now = utcnow()

    for code, name, account_type, balance in SAMPLE_ACCOUNTS:
        store.accounts.add(Account(
            id=new_id(),
            code=code,
            name=name,
            account_type=account_type,
            balance=Decimal(balance),
            created_at=now,
            is_active=True,
        ))

    for reference, description, entry_date, posted, lines in SAMPLE_ENTRIES:
        store.journal_entries.add(JournalEntry(
            id=new_id(),
            description=description,
            reference_number=reference,
            entry_date=entry_date or now,
            is_posted=posted,
            created_at=now,
            lines=[
                JournalLine(
                    id=new_id(),
                    position=position,
                    account_code=code,
                    account_id=account_id,
                    debit_amount=Decimal(debit),
                    credit_amount=Decimal(credit),
                    narration=narration,
                )
                for position, (code, account_id, debit, credit, narration)
                in enumerate(lines)
            ],
        ))

    store.ledger_keys.add(LedgerKey(
        id=new_id(),
        key_name="Production Key",
        encryption_key=generate_encryption_key(),
        created_at=datetime(2024, 1, 1),
        expires_at=datetime(2025, 12, 31),
        is_active=True,
    ))
    store.ledger_keys.add(LedgerKey(
        id=new_id(),
        key_name="Development Key",
        encryption_key=generate_encryption_key(),
        created_at=now - timedelta(days=90),
        expires_at=None,
        is_active=True,
    ))
    store.ledger_keys.add(LedgerKey(
        id=new_id(),
        key_name="Backup Key",
        encryption_key=generate_encryption_key(),
        created_at=datetime(2023, 6, 1),
        expires_at=datetime(2024, 6, 1),
        is_active=False,
    ))
