"""
User database model.
"""

from datetime import datetime
import uuid

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from domain.models.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Person whose meals are being tracked"""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String(320), unique=True, nullable=False, index=True)
    name = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    meals = relationship(
        "Meal",
        back_populates="user",
        cascade="all, delete-orphan",
    )
