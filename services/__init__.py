"""Services package - Business logic layer"""

from services.user_service import UserService
from services.meal_service import MealService
from services.metrics_service import MetricsService

__all__ = [
    "UserService",
    "MealService",
    "MetricsService",
]
