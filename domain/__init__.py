"""
Domain layer - ORM models, schemas, and the meal time and diet streak rules.
"""

from domain import models, schemas, meal_time, streak

__all__ = ["models", "schemas", "meal_time", "streak"]
