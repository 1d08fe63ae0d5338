"""User management routes"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import EmailStr
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import NOT_FOUND, CONFLICT
from domain.schemas.user_schemas import UserCreate, UserResponse, UserDeletedResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dailydiet.api.users")


@router.post(
    "/create",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT,
)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user; the email must not be registered yet"""
    new_user = UserService.create_user(db, user.email, user.name)
    return UserResponse.model_validate(new_user)


@router.get("", response_model=UserResponse, responses=NOT_FOUND)
def get_user_by_email(
    email: EmailStr = Query(..., description="Email the user registered with"),
    db: Session = Depends(get_db),
):
    """Look a user up by email."""
    user = UserService.get_user_by_email(db, email)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}/delete", response_model=UserDeletedResponse, responses=NOT_FOUND
)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Delete a user together with all of their meals."""
    UserService.delete_user(db, user_id)
    return UserDeletedResponse(deleted=user_id)
