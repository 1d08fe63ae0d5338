"""
App package - Application configuration and core utilities.
Contains settings and the service-layer exception hierarchy.
"""

from app.config import settings
from app.exceptions import (
    DailyDietError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "settings",
    "DailyDietError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
]
