"""Base service class with common functionality."""

from typing import TypeVar, Generic, Type, Optional, List, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.models.base import BaseModel
from app.utils.logger import logger

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseService(Generic[ModelType]):
    """
    Base service class providing common CRUD operations.

    This class provides:
    - Standard get/list/create/update/delete operations
    - Rollback and error logging around every write
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize base service.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model
        self.model_name = model.__name__.lower()

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        """
        Get a record by ID.

        Args:
            db: Database session
            id: Record ID

        Returns:
            Model instance or None if not found
        """
        try:
            return db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching {self.model_name} with id {id}: {e}")
            raise

    def get_multi(
        self,
        db: Session,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[ModelType]:
        """
        Get multiple records with optional equality filters, newest first.

        Args:
            db: Database session
            skip: Number of records to skip
            limit: Maximum number of records to return
            filters: Optional column/value pairs

        Returns:
            List of model instances
        """
        try:
            query = self._filtered(db, filters)
            return (
                query.order_by(self.model.created_at.desc(), self.model.id.desc())
                .offset(skip)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching {self.model_name} records: {e}")
            raise

    def create(self, db: Session, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new record.

        Args:
            db: Database session
            obj_in: Dictionary with creation data

        Returns:
            Created model instance
        """
        try:
            db_obj = self.model(**obj_in)
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)

            logger.info(f"Created {self.model_name} with id {db_obj.id}")
            return db_obj

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating {self.model_name}: {e}")
            raise

    def update(self, db: Session, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """
        Update an existing record; keys the model does not have are ignored.

        Args:
            db: Database session
            db_obj: Existing model instance
            obj_in: Dictionary with update data

        Returns:
            Updated model instance
        """
        try:
            for field, value in obj_in.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)

            db.commit()
            db.refresh(db_obj)

            logger.info(f"Updated {self.model_name} with id {db_obj.id}")
            return db_obj

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating {self.model_name}: {e}")
            raise

    def delete(self, db: Session, id: int) -> bool:
        """
        Delete a record.

        Args:
            db: Database session
            id: Record ID to delete

        Returns:
            True if deleted, False if no such record
        """
        try:
            db_obj = self.get(db, id=id)
            if not db_obj:
                return False

            db.delete(db_obj)
            db.commit()

            logger.info(f"Deleted {self.model_name} with id {id}")
            return True

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting {self.model_name}: {e}")
            raise

    def count(self, db: Session, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            db: Database session
            filters: Optional column/value pairs

        Returns:
            Number of records
        """
        try:
            return self._filtered(db, filters).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_name} records: {e}")
            raise

    def _filtered(self, db: Session, filters: Optional[Dict[str, Any]]):
        query = db.query(self.model)
        if filters:
            for key, value in filters.items():
                if hasattr(self.model, key):
                    query = query.filter(getattr(self.model, key) == value)
        return query
