"""
Meal Repository - Data access layer for meal operations
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_for_user(self, user_id: str, meal_id: str) -> Optional[Meal]:
        """Get a meal by ID, only if it belongs to the given user"""
        return self.find(id=meal_id, user_id=user_id)

    def list_for_user(self, user_id: str, chronological: bool = False) -> List[Meal]:
        """
        Get all meals of a user.

        Rows come back in storage order (insertion order) unless
        ``chronological`` is set, in which case they are sorted by ``when``.
        """
        if chronological:
            return self.find_all(Meal.when, Meal.created_at, user_id=user_id)
        return self.find_all(user_id=user_id)

