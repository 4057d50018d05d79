"""
Pydantic schemas for journal entry operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ledgerx.clock import as_naive_utc


# --- Request Schemas ---

class JournalLineCreate(BaseModel):
    """A single debit or credit line."""
    account_id: str = ""
    account_code: str = ""
    debit_amount: Decimal = Field(
        default=Decimal("0"), max_digits=19, decimal_places=4
    )
    credit_amount: Decimal = Field(
        default=Decimal("0"), max_digits=19, decimal_places=4
    )
    narration: str = ""


class JournalEntryCreate(BaseModel):
    """
    A complete journal entry. Line count, amounts and the balance
    rule are checked by JournalEntryService, not here.
    """
    description: str = ""
    reference_number: str = ""
    entry_date: datetime | None = None
    lines: list[JournalLineCreate] = Field(default_factory=list)

    @field_validator("entry_date")
    @classmethod
    def entry_date_to_utc(cls, v: datetime | None) -> datetime | None:
        return as_naive_utc(v)


class JournalEntryUpdate(BaseModel):
    """Only the description of a draft entry can change."""
    description: str | None = None


# --- Response Schemas ---

class JournalLineResponse(BaseModel):
    id: str
    account_id: str
    account_code: str
    debit_amount: Decimal
    credit_amount: Decimal
    narration: str

    model_config = {"from_attributes": True}


class JournalEntryResponse(BaseModel):
    id: str
    description: str
    reference_number: str
    entry_date: datetime
    is_posted: bool
    created_at: datetime
    lines: list[JournalLineResponse]

    model_config = {"from_attributes": True}
