from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class MealCreate(BaseModel):
    """Body of POST /users/{user_id}/meals/create.

    ``day`` (YYYY-MM-DD) and ``hour`` (HH:MM) are only used when both are sent;
    otherwise the meal is stamped with the time the request is processed.
    """

    name: str
    description: str
    in_diet: Optional[bool] = None
    day: Optional[str] = None
    hour: Optional[str] = None


class MealUpdate(BaseModel):
    """Body of PUT /users/{user_id}/meals/{meal_id}/update; omitted fields are left untouched."""

    name: Optional[str] = None
    description: Optional[str] = None
    in_diet: Optional[bool] = None
    day: Optional[str] = None
    hour: Optional[str] = None


class MealResponse(BaseModel):
    id: str
    user_id: str
    name: str
    description: str
    in_diet: bool
    when: datetime
    created_at: datetime

    model_config = {"from_attributes": True}


class MealListResponse(BaseModel):
    meals: List[MealResponse] = Field(default_factory=list)


class MealDeletedResponse(BaseModel):
    status: str = "ok"
    deleted: str
