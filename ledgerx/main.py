"""
LedgerX — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledgerx.config import get_settings
from ledgerx.logging_config import setup_logging
from ledgerx.repositories.memory import InMemoryStore
from ledgerx.api.errors import register_exception_handlers
from ledgerx.api.health import router as health_router
from ledgerx.api.accounts import router as accounts_router
from ledgerx.api.journal_entries import router as journal_entries_router
from ledgerx.api.reports import router as reports_router
from ledgerx.api.ledger_keys import router as ledger_keys_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.STORAGE_BACKEND == "sql":
        from ledgerx.models.base import SessionLocal, engine
        from ledgerx.repositories.sql import init_database

        db = SessionLocal()
        try:
            init_database(engine, db, seed=settings.SEED_SAMPLE_DATA)
        finally:
            db.close()
    logger.info(
        "%s %s started (storage: %s)",
        settings.APP_NAME, settings.APP_VERSION, settings.STORAGE_BACKEND,
    )
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Double-entry bookkeeping: accounts, journal entries, "
                    "ledger keys and reports",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    if settings.STORAGE_BACKEND != "sql":
        app.state.memory_store = InMemoryStore(seed=settings.SEED_SAMPLE_DATA)

    # Register routers
    app.include_router(health_router)
    app.include_router(accounts_router)
    app.include_router(journal_entries_router)
    app.include_router(reports_router)
    app.include_router(ledger_keys_router)

    return app


app = create_app()
