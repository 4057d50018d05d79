"""
Report service — trial balance and debit/credit totals.

Reports are recomputed from posted entries on every call; drafts
never affect them. Lines are grouped by account code, and codes
that are not in the chart of accounts still get a row (with an
empty account name) so that no posted amount goes missing.
"""

import logging
from decimal import Decimal

from ledgerx.repositories.base import LedgerStore
from ledgerx.schemas.report import TrialBalanceReport, TrialBalanceRow
from ledgerx.services.journal_entry_service import BALANCE_TOLERANCE

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class ReportService:

    def __init__(self, store: LedgerStore):
        self.store = store

    def get_trial_balance(self) -> TrialBalanceReport:
        logger.info("Generating trial balance report")
        accounts = self.store.accounts.get_all()
        entries = self.store.journal_entries.get_posted()

        # account code -> [debit, credit]; dict order gives known
        # accounts first, then unknown codes as they are met
        balances: dict[str, list[Decimal]] = {
            account.code: [ZERO, ZERO] for account in accounts
        }
        names = {account.code: account.name for account in accounts}

        for entry in entries:
            for line in entry.lines:
                totals = balances.setdefault(line.account_code, [ZERO, ZERO])
                totals[0] += line.debit_amount
                totals[1] += line.credit_amount

        rows = [
            TrialBalanceRow(
                account_code=code,
                account_name=names.get(code, ""),
                debit=debit,
                credit=credit,
            )
            for code, (debit, credit) in balances.items()
        ]

        total_debits = sum((row.debit for row in rows), ZERO)
        total_credits = sum((row.credit for row in rows), ZERO)
        is_balanced = abs(total_debits - total_credits) <= BALANCE_TOLERANCE

        logger.info(
            "Trial balance generated - debits: %s, credits: %s, balanced: %s",
            total_debits, total_credits, is_balanced,
        )
        return TrialBalanceReport(
            accounts=rows,
            total_debits=total_debits,
            total_credits=total_credits,
            is_balanced=is_balanced,
        )

    def get_total_debit(self) -> Decimal:
        """Sum of debit amounts over all posted lines."""
        entries = self.store.journal_entries.get_posted()
        return sum(
            (line.debit_amount for entry in entries for line in entry.lines),
            ZERO,
        )

    def get_total_credit(self) -> Decimal:
        """Sum of credit amounts over all posted lines."""
        entries = self.store.journal_entries.get_posted()
        return sum(
            (line.credit_amount for entry in entries for line in entry.lines),
            ZERO,
        )
