"""
Report API endpoints. Read-only.
"""

from fastapi import APIRouter, Depends

from ledgerx.dependencies import get_store
from ledgerx.repositories.base import LedgerStore
from ledgerx.services.report_service import ReportService
from ledgerx.schemas.report import TrialBalanceReport, TotalResponse

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/trial-balance", response_model=TrialBalanceReport)
def trial_balance(store: LedgerStore = Depends(get_store)):
    """Debit and credit totals per account code over posted entries."""
    return ReportService(store).get_trial_balance()


@router.get("/total-debits", response_model=TotalResponse)
def total_debits(store: LedgerStore = Depends(get_store)):
    return TotalResponse(total=ReportService(store).get_total_debit())


@router.get("/total-credits", response_model=TotalResponse)
def total_credits(store: LedgerStore = Depends(get_store)):
    return TotalResponse(total=ReportService(store).get_total_credit())
