"""
Database engine, session management, and base model.

Models double as the in-memory entities: a mapped object works
fine without ever being attached to a session, so the in-memory
store keeps the same classes the SQL store persists.
"""

import uuid

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from ledgerx.config import get_settings

settings = get_settings()

# --- Engine ---
# create_engine does not connect; nothing touches the database
# until the SQL storage backend opens a session.
connect_args = (
    {"check_same_thread": False}
    if settings.DATABASE_URL.startswith("sqlite")
    else {}
)
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# --- Session Factory ---
# autocommit=False: the API layer decides when a request's
# changes are committed or rolled back.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    """Generate a fresh entity identifier."""
    return str(uuid.uuid4())

