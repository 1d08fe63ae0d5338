"""
User Repository - Data access layer for user operations
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.find(email=email)

    def create_user(self, email: str, name: str) -> User:
        """Create a new user"""
        user = User(email=email, name=name)
        try:
            return self.create(user)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                "User already exists", details={"email": email}
            ) from e

    def delete_user(self, user_id: str) -> bool:
        """Delete user and all their meals (cascade)"""
        user = self.get_by_id(user_id)
        if user:
            self.delete(user)
            return True
        return False
