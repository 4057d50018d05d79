"""
Shared test fixtures.

Service and API tests run against a fresh, unseeded in-memory
store. SQL repository tests get an isolated SQLite database whose
tables are created before and dropped after each test.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ledgerx.dependencies import get_store
from ledgerx.main import app
from ledgerx.models.base import Base
from ledgerx.repositories.memory import InMemoryStore
from ledgerx.repositories.sql import SqlStore


# SQLite file database: no external database needed.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture
def store():
    """An empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def seeded_store():
    """An in-memory store loaded with the sample data."""
    return InMemoryStore(seed=True)


@pytest.fixture
def db_session():
    """
    Provide a database session on freshly created tables.

    Tables are dropped afterwards so every test starts clean.
    """
    Base.metadata.create_all(bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sql_store(db_session):
    return SqlStore(db_session)


@pytest.fixture
def client(store):
    """
    Provide a test client bound to the test store.

    We override the get_store dependency so the app uses the
    fixture's store instead of the process-wide one.
    """
    def override_get_store():
        yield store

    app.dependency_overrides[get_store] = override_get_store
    yield TestClient(app)
    app.dependency_overrides.clear()
