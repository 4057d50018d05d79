"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import IntegrityError

from ledgerx.dependencies import get_store
from ledgerx.exceptions import ConflictError, LedgerError, NotFoundError
from ledgerx.repositories.base import LedgerStore
from ledgerx.services.account_service import AccountService
from ledgerx.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(store: LedgerStore = Depends(get_store)):
    """List every account."""
    return AccountService(store).get_all_accounts()


@router.get("/active", response_model=list[AccountResponse])
def list_active_accounts(store: LedgerStore = Depends(get_store)):
    """List accounts with is_active set."""
    return AccountService(store).get_active_accounts()


@router.get("/by-code/{code}", response_model=AccountResponse)
def get_account_by_code(code: str, store: LedgerStore = Depends(get_store)):
    account = AccountService(store).get_account_by_code(code)
    if account is None:
        raise NotFoundError(f"Account with code {code} not found")
    return account


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: str, store: LedgerStore = Depends(get_store)):
    account = AccountService(store).get_account(account_id)
    if account is None:
        raise NotFoundError(f"Account with id {account_id} not found")
    return account


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    http_request: Request,
    response: Response,
    store: LedgerStore = Depends(get_store),
):
    """
    Create an account.

    400 for missing fields or an unknown type, 409 if the code is
    already in use.
    """
    service = AccountService(store)
    try:
        account = service.create_account(request)
        store.commit()
    except LedgerError:
        store.rollback()
        raise
    except IntegrityError:
        # Lost the race on the unique code index
        store.rollback()
        raise ConflictError(f"Account with code {request.code} already exists")

    response.headers["Location"] = str(
        http_request.url_for("get_account", account_id=account.id)
    )
    return account


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    request: AccountUpdate,
    store: LedgerStore = Depends(get_store),
):
    """Update name, type and/or active flag. Omitted fields are kept."""
    service = AccountService(store)
    try:
        account = service.update_account(account_id, request)
        store.commit()
    except LedgerError:
        store.rollback()
        raise

    if account is None:
        raise NotFoundError(f"Account with id {account_id} not found")
    return account


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: str, store: LedgerStore = Depends(get_store)):
    service = AccountService(store)
    if not service.delete_account(account_id):
        raise NotFoundError(f"Account with id {account_id} not found")
    store.commit()
    return Response(status_code=204)
