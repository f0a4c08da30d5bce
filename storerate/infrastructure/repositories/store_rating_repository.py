"""
SQLAlchemy Implementation of StoreRating Repository.
"""

from typing import List, Optional

from storerate.domain.models.store_rating import StoreRating
from storerate.domain.repositories.store_rating_repository import StoreRatingRepository
from storerate.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyStoreRatingRepository(SQLAlchemyRepository[StoreRating], StoreRatingRepository):
    """StoreRating repository implementation using SQLAlchemy."""

    def recent(self, store_id: int | None = None, limit: int | None = None) -> List[StoreRating]:
        query = self.db.query(StoreRating)
        if store_id is not None:
            query = query.filter(StoreRating.store_id == store_id)
        query = query.order_by(StoreRating.created_at.desc(), StoreRating.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def by_value(self, value: int, store_id: int | None = None) -> List[StoreRating]:
        query = self.db.query(StoreRating).filter(StoreRating.value == value)
        if store_id is not None:
            query = query.filter(StoreRating.store_id == store_id)
        return query.order_by(StoreRating.id).all()

    def get_for(self, user_id: int, store_id: int) -> Optional[StoreRating]:
        return (
            self.db.query(StoreRating)
            .filter(StoreRating.user_id == user_id, StoreRating.store_id == store_id)
            .first()
        )

    def rating_exists(self, user_id: int, store_id: int, exclude_id: int | None = None) -> bool:
        query = self.db.query(StoreRating.id).filter(
            StoreRating.user_id == user_id,
            StoreRating.store_id == store_id,
        )
        if exclude_id is not None:
            query = query.filter(StoreRating.id != exclude_id)
        return query.first() is not None

    def for_user(self, user_id: int) -> List[StoreRating]:
        return (
            self.db.query(StoreRating)
            .filter(StoreRating.user_id == user_id)
            .order_by(StoreRating.id)
            .all()
        )
