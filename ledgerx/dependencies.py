"""
FastAPI dependencies.

get_store hands each request the configured store. The in-memory
store is built once by create_app and kept on app.state; the SQL
store wraps a fresh session per request.
"""

from typing import Iterator

from fastapi import Request

from ledgerx.config import get_settings
from ledgerx.models.base import SessionLocal
from ledgerx.repositories.base import LedgerStore
from ledgerx.repositories.sql import SqlStore


def get_store(request: Request) -> Iterator[LedgerStore]:
    settings = get_settings()
    if settings.STORAGE_BACKEND != "sql":
        yield request.app.state.memory_store
        return

    db = SessionLocal()
    try:
        yield SqlStore(db)
    finally:
        db.close()
