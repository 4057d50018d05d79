"""
Pydantic schemas for ledger key operations.

The response deliberately has no encryption_key field: key
material never leaves the service through the API.
"""

from datetime import datetime

from pydantic import BaseModel, field_validator

from ledgerx.clock import as_naive_utc


class LedgerKeyCreate(BaseModel):
    key_name: str = ""
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def expires_at_to_utc(cls, v: datetime | None) -> datetime | None:
        return as_naive_utc(v)


class LedgerKeyResponse(BaseModel):
    id: str
    key_name: str
    created_at: datetime
    expires_at: datetime | None
    is_active: bool

    model_config = {"from_attributes": True}
