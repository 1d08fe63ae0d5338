"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    UserResponse,
    UserDeletedResponse,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDeletedResponse,
)
from domain.schemas.metrics_schemas import MetricsResponse

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    "UserDeletedResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealDeletedResponse",
    # Metrics schemas
    "MetricsResponse",
]
