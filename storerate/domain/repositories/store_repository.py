"""
Store Repository Interface.
Named query helpers and rating aggregates for Stores.
"""

from typing import List, Dict, Optional

from storerate.domain.repositories.base import BaseRepository
from storerate.domain.models.store import Store
from storerate.domain.models.store_rating import StoreRating
from storerate.domain.models.user import User


class StoreRepository(BaseRepository[Store]):
    """Interface for Store-specific operations."""

    def highly_rated(self, threshold: float = 4.0) -> List[Store]:
        """Stores whose mean rating is at least the threshold."""
        ...

    def search_by_location(self, query: str) -> List[Store]:
        """Case-insensitive substring match on address."""
        ...

    def get_by_proprietor(self, proprietor_id: int) -> Optional[Store]:
        """The store owned by the given user, if any."""
        ...

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """Whether another store already uses this email (case-insensitive)."""
        ...

    def rating_users(self, store_id: int) -> List[User]:
        """Users who rated the store."""
        ...

    def average_rating(self, store_id: int) -> Optional[float]:
        """AVG(value) over the store's ratings, None when unrated."""
        ...

    def rating_count(self, store_id: int) -> int:
        """Number of ratings for the store."""
        ...

    def rating_distribution(self, store_id: int) -> Dict[int, int]:
        """Rating value -> count, for values present."""
        ...

    def recent_ratings(self, store_id: int, limit: int = 5) -> List[StoreRating]:
        """Newest ratings for the store."""
        ...

    def lock(self, store_id: int) -> None:
        """Lock the store row for the rest of the transaction."""
        ...

    def write_average_rating(self, store_id: int, average: Optional[float]) -> None:
        """Persist the cached average without running store validation."""
        ...
