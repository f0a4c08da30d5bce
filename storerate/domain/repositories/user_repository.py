"""
User Repository Interface.
Named query helpers for Users.
"""

from typing import List, Dict, Any, Optional

from storerate.domain.repositories.base import BaseRepository
from storerate.domain.models.user import User
from storerate.domain.models.store import Store
from storerate.domain.schemas.user import UserFilter


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def by_role(self, role: str) -> List[User]:
        """Users holding the given role."""
        ...

    def active_users(self) -> List[User]:
        """Users whose active flag is set."""
        ...

    def search_by_name(self, query: str) -> List[User]:
        """Case-insensitive substring match on name."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive email lookup."""
        ...

    def get_by_auth_token(self, token: str) -> Optional[User]:
        """Lookup by opaque auth token."""
        ...

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Whether another user already uses this email (case-insensitive)."""
        ...

    def auth_token_taken(self, token: str) -> bool:
        """Whether any user already holds this token."""
        ...

    def rated_stores(self, user_id: int) -> List[Store]:
        """Stores the user has rated."""
        ...

    def get_with_filters(self, filters: UserFilter) -> Dict[str, Any]:
        """Get users with filtering and pagination."""
        ...
