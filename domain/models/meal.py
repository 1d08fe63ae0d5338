"""
Meal database model.
"""

from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.user import generate_id


class Meal(Base):
    """A meal eaten by a user, flagged as in or out of the diet"""

    __tablename__ = "meals"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    in_diet = Column(Boolean, nullable=False, default=True)
    when = Column(DateTime, nullable=False, default=datetime.utcnow)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="meals")
