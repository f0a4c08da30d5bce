"""
SQLAlchemy Implementation of Store Repository.
"""

from typing import Dict, List, Optional

from sqlalchemy import func, select, update

from storerate.domain.models.store import Store
from storerate.domain.models.store_rating import StoreRating
from storerate.domain.models.user import User
from storerate.domain.repositories.store_repository import StoreRepository
from storerate.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyStoreRepository(SQLAlchemyRepository[Store], StoreRepository):
    """Store repository implementation using SQLAlchemy."""

    def highly_rated(self, threshold: float = 4.0) -> List[Store]:
        return (
            self.db.query(Store)
            .join(StoreRating, StoreRating.store_id == Store.id)
            .group_by(Store.id)
            .having(func.avg(StoreRating.value) >= threshold)
            .order_by(Store.id)
            .all()
        )

    def search_by_location(self, query: str) -> List[Store]:
        return (
            self.db.query(Store)
            .filter(Store.address.ilike(f"%{query}%"))
            .order_by(Store.id)
            .all()
        )

    def get_by_proprietor(self, proprietor_id: int) -> Optional[Store]:
        return self.db.query(Store).filter(Store.proprietor_id == proprietor_id).first()

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(Store.id).filter(func.lower(Store.email) == email.lower())
        if exclude_id is not None:
            query = query.filter(Store.id != exclude_id)
        return query.first() is not None

    def rating_users(self, store_id: int) -> List[User]:
        return (
            self.db.query(User)
            .join(StoreRating, StoreRating.user_id == User.id)
            .filter(StoreRating.store_id == store_id)
            .order_by(User.id)
            .all()
        )

    def average_rating(self, store_id: int) -> Optional[float]:
        average = (
            self.db.query(func.avg(StoreRating.value))
            .filter(StoreRating.store_id == store_id)
            .scalar()
        )
        # Postgres returns Decimal, SQLite returns float
        return float(average) if average is not None else None

    def rating_count(self, store_id: int) -> int:
        return (
            self.db.query(func.count(StoreRating.id))
            .filter(StoreRating.store_id == store_id)
            .scalar()
        ) or 0

    def rating_distribution(self, store_id: int) -> Dict[int, int]:
        rows = (
            self.db.query(StoreRating.value, func.count(StoreRating.id))
            .filter(StoreRating.store_id == store_id)
            .group_by(StoreRating.value)
            .order_by(StoreRating.value)
            .all()
        )
        return {value: count for value, count in rows}

    def recent_ratings(self, store_id: int, limit: int = 5) -> List[StoreRating]:
        return (
            self.db.query(StoreRating)
            .filter(StoreRating.store_id == store_id)
            .order_by(StoreRating.created_at.desc(), StoreRating.id.desc())
            .limit(limit)
            .all()
        )

    def lock(self, store_id: int) -> None:
        # FOR UPDATE is dropped by dialects without row locks (SQLite)
        self.db.execute(select(Store.id).where(Store.id == store_id).with_for_update())

    def write_average_rating(self, store_id: int, average: Optional[float]) -> None:
        self.db.execute(
            update(Store)
            .where(Store.id == store_id)
            .values(average_rating=average)
            .execution_options(synchronize_session="evaluate")
        )
