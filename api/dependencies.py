"""
API dependencies for dependency injection
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Tests override this dependency to point the routes at their own database:

        app.dependency_overrides[get_db] = lambda: session
    """
    yield from get_db_session()
