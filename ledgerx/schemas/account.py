"""
Pydantic schemas for account operations.

Request fields are plain strings on purpose: emptiness and the
account type are business rules checked by AccountService, which
reports them with the ledger's own error messages.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field

from ledgerx.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request to create an account."""
    code: str = ""
    name: str = ""
    account_type: str = Field(
        default="", validation_alias=AliasChoices("account_type", "type")
    )
    balance: Decimal = Field(default=Decimal("0"), max_digits=19, decimal_places=4)


class AccountUpdate(BaseModel):
    """
    Partial update. Omitted or blank fields are left as they are.
    """
    name: str | None = None
    account_type: str | None = Field(
        default=None, validation_alias=AliasChoices("account_type", "type")
    )
    is_active: bool | None = None


class AccountResponse(BaseModel):
    id: str
    code: str
    name: str
    account_type: AccountType
    balance: Decimal
    created_at: datetime
    is_active: bool

    model_config = {"from_attributes": True}
