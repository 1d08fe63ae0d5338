"""Meal tracking routes, scoped to a user"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import NOT_FOUND, BAD_MEAL_TIME
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    MealDeletedResponse,
)
from services.meal_service import MealService

router = APIRouter(prefix="/users/{user_id}/meals", tags=["Meals"])
logger = logging.getLogger("dailydiet.api.meals")


@router.post(
    "/create",
    response_model=MealResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**NOT_FOUND, **BAD_MEAL_TIME},
)
def create_meal(user_id: str, meal: MealCreate, db: Session = Depends(get_db)):
    """
    Register a meal for a user.

    Send both `day` (YYYY-MM-DD) and `hour` (HH:MM) to set when the meal was
    eaten; otherwise the current time is used. `in_diet` defaults to true.
    """
    new_meal = MealService.create_meal(db, user_id, meal)
    return MealResponse.model_validate(new_meal)


@router.put(
    "/{meal_id}/update",
    response_model=MealResponse,
    responses={**NOT_FOUND, **BAD_MEAL_TIME},
)
def update_meal(
    user_id: str, meal_id: str, meal: MealUpdate, db: Session = Depends(get_db)
):
    """
    Edit a meal. Only the fields sent are changed.

    Sending only `day` keeps the stored time of day; sending only `hour`
    keeps the stored date.
    """
    updated = MealService.update_meal(db, user_id, meal_id, meal)
    return MealResponse.model_validate(updated)


@router.delete(
    "/{meal_id}/delete", response_model=MealDeletedResponse, responses=NOT_FOUND
)
def delete_meal(user_id: str, meal_id: str, db: Session = Depends(get_db)):
    MealService.delete_meal(db, user_id, meal_id)
    return MealDeletedResponse(deleted=meal_id)


@router.get("", response_model=MealListResponse, responses=NOT_FOUND)
def list_meals(user_id: str, db: Session = Depends(get_db)):
    """List every meal of a user."""
    meals = MealService.list_meals(db, user_id)
    return MealListResponse(meals=[MealResponse.model_validate(m) for m in meals])


@router.get("/{meal_id}", response_model=MealResponse, responses=NOT_FOUND)
def get_meal(user_id: str, meal_id: str, db: Session = Depends(get_db)):
    meal = MealService.get_meal(db, user_id, meal_id)
    return MealResponse.model_validate(meal)
