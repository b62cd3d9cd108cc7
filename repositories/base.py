"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from typing import Generic, TypeVar, Optional, Type
from uuid import UUID
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import ConflictError, DataAccessError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("smartcanteen.repositories")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Update existing entity"""
        self.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: UUID) -> bool:
        """Delete entity by ID"""
        entity = self.get_by_id(entity_id)
        if entity:
            self.db.delete(entity)
            self.commit()
            return True
        return False

    def commit(self) -> None:
        """
        Commit the unit of work.

        On failure the session is rolled back so in-memory state matches the
        store again, and the error is translated for the API handlers.
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(
                f"commit_conflict model={self.model.__name__} error={e.orig}"
            )
            raise ConflictError(f"{self.model.__name__} conflicts with an existing record")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"commit_failed model={self.model.__name__} error={e}")
            raise DataAccessError() from e
