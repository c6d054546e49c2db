"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")

# Largest primary key a 64-bit INTEGER column can hold
MAX_ROW_ID = 2**63 - 1


def id_in_range(entity_id: int) -> bool:
    """Ids outside the column range cannot match any row"""
    return 1 <= entity_id <= MAX_ROW_ID


@dataclass
class Page(Generic[ModelType]):
    """One slice of an ordered result set plus total-count metadata."""

    content: List[ModelType] = field(default_factory=list)
    number: int = 0  # 0-based page index
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by primary key, or None if it does not exist"""
        if not id_in_range(entity_id):
            return None
        return self.db.get(self.model, entity_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get all entities with offset pagination"""
        return self.db.query(self.model).offset(skip).limit(limit).all()

    def count(self) -> int:
        return self.db.query(self.model).count()

    def save(self, entity: ModelType) -> ModelType:
        """Insert or update an entity (upsert on the session)"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
