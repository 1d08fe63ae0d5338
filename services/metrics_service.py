from typing import Optional
from sqlalchemy.orm import Session
import logging

from domain.streak import DietMetrics, summarize_meals
from repositories import MealRepository
from services.user_service import UserService
from app.config import settings, StreakOrdering

logger = logging.getLogger("dailydiet.metrics")


class MetricsService:
    @staticmethod
    def get_metrics(
        db: Session, user_id: str, ordering: Optional[StreakOrdering] = None
    ) -> DietMetrics:
        """
        Meal counts and current in-diet streak for a user.

        Counts and streak are taken from one listing of the user's meals, so
        ``total_meals == in_diet_meals + not_in_diet_meals`` always holds.

        Args:
            db: Database session
            user_id: ID of the user
            ordering: order the meals are walked in for the streak; defaults
                to the ``streak_ordering`` setting

        Returns:
            DietMetrics

        Raises:
            NotFoundError: If the user does not exist
        """
        UserService.get_user(db, user_id)
        ordering = ordering or settings.streak_ordering

        meals = MealRepository(db).list_for_user(
            user_id, chronological=ordering == StreakOrdering.CHRONOLOGICAL
        )
        metrics = summarize_meals(meals)

        logger.info(
            f"metrics_computed user_id={user_id} total={metrics.total_meals} "
            f"in_diet={metrics.in_diet_meals} streak={metrics.days_in_sequence} "
            f"ordering={ordering.value}"
        )
        return metrics
