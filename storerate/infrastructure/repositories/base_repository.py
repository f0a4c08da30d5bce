"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Generic, List, Optional, Type, TypeVar

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storerate.core.exceptions import PersistenceException
from storerate.domain.repositories.base import BaseRepository
from storerate.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)

logger = structlog.get_logger(__name__)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def list(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return (
            self.db.query(self.model)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def add(self, db_obj: ModelType) -> ModelType:
        self.db.add(db_obj)
        self._flush()
        return db_obj

    def remove(self, db_obj: ModelType) -> None:
        self.db.delete(db_obj)
        self._flush()

    def reset(self, db_obj: ModelType) -> None:
        self.db.refresh(db_obj)

    def commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self._fail(exc)

    def _flush(self) -> None:
        try:
            self.db.flush()
        except IntegrityError as exc:
            self._fail(exc)

    def _fail(self, exc: IntegrityError) -> None:
        self.db.rollback()
        logger.error(
            "Database rejected write",
            model=self.model.__name__,
            error=str(exc.orig),
        )
        raise PersistenceException(
            f"Could not persist {self.model.__name__}",
            details={"error": str(exc.orig)},
        ) from exc
