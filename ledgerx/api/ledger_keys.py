"""
Ledger key API endpoints.

Responses use LedgerKeyResponse, which has no encryption_key
field, so key material is never sent to clients.
"""

from fastapi import APIRouter, Depends, Request, Response

from ledgerx.dependencies import get_store
from ledgerx.exceptions import LedgerError, NotFoundError
from ledgerx.repositories.base import LedgerStore
from ledgerx.services.ledger_key_service import LedgerKeyService
from ledgerx.schemas.ledger_key import LedgerKeyCreate, LedgerKeyResponse

router = APIRouter(prefix="/ledger-keys", tags=["Ledger Keys"])


@router.get("", response_model=list[LedgerKeyResponse])
def list_keys(store: LedgerStore = Depends(get_store)):
    return LedgerKeyService(store).get_all_keys()


@router.get("/active", response_model=list[LedgerKeyResponse])
def list_active_keys(store: LedgerStore = Depends(get_store)):
    """Active keys that have no expiry or expire in the future."""
    return LedgerKeyService(store).get_active_keys()


@router.get("/expired", response_model=list[LedgerKeyResponse])
def list_expired_keys(store: LedgerStore = Depends(get_store)):
    """Keys whose expiry has passed, whether or not still flagged active."""
    return LedgerKeyService(store).get_expired_keys()


@router.get("/{key_id}", response_model=LedgerKeyResponse)
def get_key(key_id: str, store: LedgerStore = Depends(get_store)):
    key = LedgerKeyService(store).get_key(key_id)
    if key is None:
        raise NotFoundError("Ledger key not found")
    return key


@router.post("", response_model=LedgerKeyResponse, status_code=201)
def create_key(
    request: LedgerKeyCreate,
    http_request: Request,
    response: Response,
    store: LedgerStore = Depends(get_store),
):
    service = LedgerKeyService(store)
    try:
        key = service.create_key(request)
        store.commit()
    except LedgerError:
        store.rollback()
        raise

    response.headers["Location"] = str(
        http_request.url_for("get_key", key_id=key.id)
    )
    return key


@router.post("/{key_id}/rotate", response_model=LedgerKeyResponse)
def rotate_key(key_id: str, store: LedgerStore = Depends(get_store)):
    """Replace the key material. Name, expiry and status are kept."""
    key = LedgerKeyService(store).rotate_key(key_id)
    if key is None:
        raise NotFoundError("Ledger key not found")
    store.commit()
    return key


@router.post("/{key_id}/deactivate", response_model=LedgerKeyResponse)
def deactivate_key(key_id: str, store: LedgerStore = Depends(get_store)):
    key = LedgerKeyService(store).deactivate_key(key_id)
    if key is None:
        raise NotFoundError("Ledger key not found")
    store.commit()
    return key


@router.delete("/{key_id}", status_code=204)
def delete_key(key_id: str, store: LedgerStore = Depends(get_store)):
    if not LedgerKeyService(store).delete_key(key_id):
        raise NotFoundError("Ledger key not found")
    store.commit()
    return Response(status_code=204)
