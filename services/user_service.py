from sqlalchemy.orm import Session
import logging

from domain.models import User
from repositories import UserRepository
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for user management"""

    @staticmethod
    def create_user(db: Session, email: str, name: str) -> User:
        """Create a user, rejecting emails that are already registered"""
        user_repo = UserRepository(db)

        if user_repo.get_by_email(email):
            logger.warning(f"user_create_conflict email={email}")
            raise ConflictError("User already exists", details={"email": email})

        user = user_repo.create_user(email=email, name=name)
        logger.info(f"user_created user_id={user.id}")
        return user

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> User:
        user = UserRepository(db).get_by_email(email)
        if not user:
            logger.warning(f"user_not_found email={email}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def get_user(db: Session, user_id: str) -> User:
        """
        Existence gate for every user-scoped operation.

        Raises:
            NotFoundError: no user with this ID
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def delete_user(db: Session, user_id: str) -> None:
        """Delete a user; their meals are removed with them"""
        if not UserRepository(db).delete_user(user_id):
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        logger.info(f"user_deleted user_id={user_id}")
