"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func

from storerate.domain.models.store import Store
from storerate.domain.models.store_rating import StoreRating
from storerate.domain.models.user import User
from storerate.domain.repositories.user_repository import UserRepository
from storerate.domain.schemas.user import UserFilter
from storerate.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def by_role(self, role: str) -> List[User]:
        return self.db.query(User).filter(User.role == role).order_by(User.id).all()

    def active_users(self) -> List[User]:
        return self.db.query(User).filter(User.active.is_(True)).order_by(User.id).all()

    def search_by_name(self, query: str) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.name.ilike(f"%{query}%"))
            .order_by(User.id)
            .all()
        )

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def get_by_auth_token(self, token: str) -> Optional[User]:
        return self.db.query(User).filter(User.auth_token == token).first()

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        query = self.db.query(User.id).filter(func.lower(User.email) == email.lower())
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def auth_token_taken(self, token: str) -> bool:
        return self.db.query(User.id).filter(User.auth_token == token).first() is not None

    def rated_stores(self, user_id: int) -> List[Store]:
        return (
            self.db.query(Store)
            .join(StoreRating, StoreRating.store_id == Store.id)
            .filter(StoreRating.user_id == user_id)
            .order_by(Store.id)
            .all()
        )

    def get_with_filters(self, filters: UserFilter) -> Dict[str, Any]:
        """Get users with filtering and pagination."""
        query = self.db.query(User)

        if filters.role:
            query = query.filter(User.role == filters.role)
        if filters.active is not None:
            query = query.filter(User.active.is_(filters.active))
        if filters.name:
            query = query.filter(User.name.ilike(f"%{filters.name}%"))

        total = query.count()
        offset = (filters.page - 1) * filters.page_size
        users = query.order_by(User.id).offset(offset).limit(filters.page_size).all()

        return {
            "items": users,
            "total": total,
            "page": filters.page,
            "page_size": filters.page_size,
            "total_pages": (total + filters.page_size - 1) // filters.page_size,
        }
