"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy import func, select
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing the storage operations the services rely on:
    insert, find, find_all, update, delete and count.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def find(self, **filters) -> Optional[ModelType]:
        """Return the first row matching all ``column=value`` filters, or None"""
        return self.db.execute(
            select(self.model).filter_by(**filters).limit(1)
        ).scalar_one_or_none()

    def find_all(self, *order_by, **filters) -> List[ModelType]:
        """Return every row matching the filters, in storage order unless order_by is given"""
        stmt = select(self.model).filter_by(**filters)
        if order_by:
            stmt = stmt.order_by(*order_by)
        return list(self.db.execute(stmt).scalars().all())

    def count(self, **filters) -> int:
        """Count rows matching the filters"""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        return int(self.db.execute(stmt).scalar_one())

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType, **fields) -> ModelType:
        """Apply the given fields to an existing entity; None values are skipped"""
        for key, value in fields.items():
            if value is not None:
                setattr(entity, key, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelType) -> None:
        """Delete entity"""
        self.db.delete(entity)
        self.db.commit()
