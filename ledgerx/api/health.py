"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ledgerx.dependencies import get_store
from ledgerx.repositories.base import LedgerStore
from ledgerx.repositories.sql import SqlStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(store: LedgerStore = Depends(get_store)):
    """
    Return application health status including storage status.

    For the SQL backend a trivial query proves the connection is
    alive; the in-memory store is healthy whenever the process is.
    """
    backend = "sql" if isinstance(store, SqlStore) else "memory"
    storage_status = "healthy"

    if isinstance(store, SqlStore):
        try:
            store.db.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Storage health check failed")
            storage_status = "unhealthy"

    return {
        "status": "healthy" if storage_status == "healthy" else "degraded",
        "service": "ledgerx",
        "storage": {"backend": backend, "status": storage_status},
    }
