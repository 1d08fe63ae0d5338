from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate
from domain.meal_time import parse_day, parse_hour, resolve_meal_time, merge_meal_time
from repositories import MealRepository
from services.user_service import UserService
from app.exceptions import NotFoundError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for a user's meals.

    Malformed day/hour input is rejected before any lookup. Every operation
    then checks that the user exists and, when a meal ID is given, that the
    meal belongs to that user.
    """

    @staticmethod
    def _get_owned_meal(db: Session, user_id: str, meal_id: str) -> Meal:
        meal = MealRepository(db).get_for_user(user_id, meal_id)
        if not meal:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError("Meal not found")
        return meal

    @staticmethod
    def create_meal(db: Session, user_id: str, data: MealCreate) -> Meal:
        when = resolve_meal_time(data.day, data.hour)
        UserService.get_user(db, user_id)

        meal = Meal(
            user_id=user_id,
            name=data.name,
            description=data.description,
            in_diet=True if data.in_diet is None else data.in_diet,
            when=when,
        )
        meal = MealRepository(db).create(meal)

        logger.info(
            f"meal_created user_id={user_id} meal_id={meal.id} "
            f"in_diet={meal.in_diet} when={meal.when.isoformat()}"
        )
        return meal

    @staticmethod
    def update_meal(db: Session, user_id: str, meal_id: str, data: MealUpdate) -> Meal:
        """
        Replace the fields present in ``data``.

        ``when`` is rebuilt from ``day``/``hour``, keeping whichever part
        (date or time of day) was not sent from the stored value.
        """
        # Reject malformed day/hour before touching storage
        if data.day:
            parse_day(data.day)
        if data.hour:
            parse_hour(data.hour)

        UserService.get_user(db, user_id)
        meal = MealService._get_owned_meal(db, user_id, meal_id)

        when = merge_meal_time(meal.when, data.day, data.hour)
        meal = MealRepository(db).update(
            meal,
            name=data.name,
            description=data.description,
            in_diet=data.in_diet,
            when=when,
        )

        logger.info(
            f"meal_updated user_id={user_id} meal_id={meal_id} "
            f"fields={sorted(data.model_dump(exclude_none=True))}"
        )
        return meal

    @staticmethod
    def delete_meal(db: Session, user_id: str, meal_id: str) -> None:
        UserService.get_user(db, user_id)
        meal = MealService._get_owned_meal(db, user_id, meal_id)

        MealRepository(db).delete(meal)
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")

    @staticmethod
    def list_meals(db: Session, user_id: str) -> List[Meal]:
        UserService.get_user(db, user_id)
        return MealRepository(db).list_for_user(user_id)

    @staticmethod
    def get_meal(db: Session, user_id: str, meal_id: str) -> Meal:
        UserService.get_user(db, user_id)
        return MealService._get_owned_meal(db, user_id, meal_id)
