"""
Journal entry API endpoints.

The router only translates: request bodies into service calls,
None/False results into 404s, and commits the store when the
service call succeeded. The double-entry rules live in
JournalEntryService.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request, Response

from ledgerx.dependencies import get_store
from ledgerx.exceptions import LedgerError, NotFoundError, ValidationError
from ledgerx.repositories.base import LedgerStore
from ledgerx.services.journal_entry_service import JournalEntryService
from ledgerx.schemas.journal_entry import (
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalEntryResponse,
)

router = APIRouter(prefix="/journal-entries", tags=["Journal Entries"])


@router.get("", response_model=list[JournalEntryResponse])
def list_entries(store: LedgerStore = Depends(get_store)):
    return JournalEntryService(store).get_all_entries()


@router.get("/posted", response_model=list[JournalEntryResponse])
def list_posted_entries(store: LedgerStore = Depends(get_store)):
    """Entries that have been posted. Drafts are left out."""
    return JournalEntryService(store).get_posted_entries()


@router.get("/by-date-range", response_model=list[JournalEntryResponse])
def list_entries_by_date_range(
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    start_date_camel: datetime | None = Query(
        None, alias="startDate", include_in_schema=False
    ),
    end_date_camel: datetime | None = Query(
        None, alias="endDate", include_in_schema=False
    ),
    store: LedgerStore = Depends(get_store),
):
    """
    Entries dated between start_date and end_date, inclusive.

    startDate and endDate are accepted as well.
    """
    start_date = start_date or start_date_camel
    end_date = end_date or end_date_camel
    if start_date is None or end_date is None:
        raise ValidationError("Both start_date and end_date are required")

    return JournalEntryService(store).get_entries_by_date_range(
        start_date, end_date
    )


@router.get("/{entry_id}", response_model=JournalEntryResponse)
def get_entry(entry_id: str, store: LedgerStore = Depends(get_store)):
    entry = JournalEntryService(store).get_entry(entry_id)
    if entry is None:
        raise NotFoundError(f"Journal entry with id {entry_id} not found")
    return entry


@router.post("", response_model=JournalEntryResponse, status_code=201)
def create_entry(
    request: JournalEntryCreate,
    http_request: Request,
    response: Response,
    store: LedgerStore = Depends(get_store),
):
    """
    Create a draft journal entry.

    The lines must balance: total debits equal total credits.
    Unbalanced or malformed entries are rejected with 400.
    """
    service = JournalEntryService(store)
    try:
        entry = service.create_journal_entry(request)
        store.commit()
    except LedgerError:
        store.rollback()
        raise

    response.headers["Location"] = str(
        http_request.url_for("get_entry", entry_id=entry.id)
    )
    return entry


@router.put("/{entry_id}", response_model=JournalEntryResponse)
def update_entry(
    entry_id: str,
    request: JournalEntryUpdate,
    store: LedgerStore = Depends(get_store),
):
    """Edit the description of a draft. Posted entries give 400."""
    service = JournalEntryService(store)
    try:
        entry = service.update_journal_entry(entry_id, request)
        store.commit()
    except LedgerError:
        store.rollback()
        raise

    if entry is None:
        raise NotFoundError(f"Journal entry with id {entry_id} not found")
    return entry


@router.post("/{entry_id}/post", status_code=204)
def post_entry(entry_id: str, store: LedgerStore = Depends(get_store)):
    """Post a draft. Unknown and already-posted entries both give 404."""
    service = JournalEntryService(store)
    if not service.post_journal_entry(entry_id):
        raise NotFoundError(
            f"Journal entry with id {entry_id} not found or already posted"
        )
    store.commit()
    return Response(status_code=204)


@router.delete("/{entry_id}", status_code=204)
def delete_entry(entry_id: str, store: LedgerStore = Depends(get_store)):
    """Delete a draft. Posted entries give 400."""
    service = JournalEntryService(store)
    try:
        deleted = service.delete_journal_entry(entry_id)
    except LedgerError:
        store.rollback()
        raise

    if not deleted:
        raise NotFoundError(f"Journal entry with id {entry_id} not found")
    store.commit()
    return Response(status_code=204)
