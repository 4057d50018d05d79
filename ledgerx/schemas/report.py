"""
Pydantic schemas for reports.
"""

from decimal import Decimal

from pydantic import BaseModel


class TrialBalanceRow(BaseModel):
    """Debit and credit totals for one account code."""
    account_code: str
    account_name: str
    debit: Decimal
    credit: Decimal


class TrialBalanceReport(BaseModel):
    accounts: list[TrialBalanceRow]
    total_debits: Decimal
    total_credits: Decimal
    is_balanced: bool


class TotalResponse(BaseModel):
    """A single aggregated amount."""
    total: Decimal
