"""
Account service — the chart of accounts.

Enforces the account rules: code, name and type are required,
the type is one of the five accounting categories, and codes are
unique. Deleting an account does not look at journal lines that
reference it.
"""

import logging

from ledgerx.clock import utcnow
from ledgerx.exceptions import ConflictError, ValidationError
from ledgerx.models.account import Account
from ledgerx.models.base import new_id
from ledgerx.models.enums import AccountType
from ledgerx.repositories.base import LedgerStore
from ledgerx.schemas.account import AccountCreate, AccountUpdate

logger = logging.getLogger(__name__)


def parse_account_type(value: str) -> AccountType:
    """Map a type name to AccountType or raise ValidationError."""
    try:
        return AccountType(value)
    except ValueError:
        raise ValidationError(
            f"Invalid account type. Must be one of: "
            f"{', '.join(AccountType.names())}"
        )


class AccountService:

    def __init__(self, store: LedgerStore):
        self.store = store
        self.accounts = store.accounts

    def get_all_accounts(self) -> list[Account]:
        logger.info("Retrieving all accounts")
        return self.accounts.get_all()

    def get_account(self, account_id: str) -> Account | None:
        if not account_id or not account_id.strip():
            logger.warning("get_account called with empty id")
            return None

        account = self.accounts.get_by_id(account_id)
        if account is None:
            logger.warning("Account with id %s not found", account_id)
        return account

    def get_account_by_code(self, code: str) -> Account | None:
        if not code or not code.strip():
            logger.warning("get_account_by_code called with empty code")
            return None
        return self.accounts.get_by_code(code)

    def get_active_accounts(self) -> list[Account]:
        logger.info("Retrieving active accounts")
        return self.accounts.get_active()

    def create_account(self, request: AccountCreate) -> Account:
        """
        Create a new account.

        Raises ValidationError for missing fields or an unknown
        type, ConflictError if the code is already taken.
        """
        if not request.code.strip():
            raise ValidationError("Account code is required")
        if not request.name.strip():
            raise ValidationError("Account name is required")
        if not request.account_type.strip():
            raise ValidationError("Account type is required")
        account_type = parse_account_type(request.account_type)

        # Not atomic: two concurrent creates with one code can both pass here
        if self.accounts.get_by_code(request.code) is not None:
            logger.warning(
                "Attempt to create account with duplicate code %s", request.code
            )
            raise ConflictError(f"Account with code {request.code} already exists")

        account = Account(
            id=new_id(),
            code=request.code,
            name=request.name,
            account_type=account_type,
            balance=request.balance,
            created_at=utcnow(),
            is_active=True,
        )
        account = self.accounts.add(account)
        logger.info("Account created with id %s", account.id)
        return account

    def update_account(
        self, account_id: str, request: AccountUpdate
    ) -> Account | None:
        """
        Overwrite only the fields supplied. Blank name or type means
        "leave unchanged", not "clear". Returns None for an unknown id.
        """
        account = self.accounts.get_by_id(account_id)
        if account is None:
            logger.warning("Cannot update: account with id %s not found", account_id)
            return None

        # Validate everything before touching the record
        new_type = None
        if request.account_type and request.account_type.strip():
            new_type = parse_account_type(request.account_type)

        if request.name and request.name.strip():
            account.name = request.name
        if new_type is not None:
            account.account_type = new_type
        if request.is_active is not None:
            account.is_active = request.is_active

        account = self.accounts.update(account)
        logger.info("Account %s updated", account_id)
        return account

    def delete_account(self, account_id: str) -> bool:
        if not self.accounts.exists(account_id):
            logger.warning("Cannot delete: account with id %s not found", account_id)
            return False

        deleted = self.accounts.delete(account_id)
        if deleted:
            logger.info("Account %s deleted", account_id)
        return deleted
