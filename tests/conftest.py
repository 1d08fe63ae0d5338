"""
Pytest configuration and shared fixtures.

Puts the project root on sys.path, points the application settings at an
in-memory database before anything imports them, and provides the database
fixtures used by repository, service and endpoint tests.
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import sessionmaker, Session  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from domain.models import build_engine, init_database  # noqa: E402
from api.dependencies import get_db  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(scope="function")
def db_engine() -> Generator[Engine, None, None]:
    """
    In-memory SQLite engine with a fresh schema for every test.

    StaticPool keeps a single connection so the schema survives across
    sessions and threads (TestClient runs sync routes in a worker thread).
    """
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_database(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine: Engine) -> Generator[Session, None, None]:
    """Database session bound to the per-test in-memory database."""
    SessionLocal = sessionmaker(bind=db_engine, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def db_client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose routes use the per-test database session."""

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
