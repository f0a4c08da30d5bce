"""
StoreRating Repository Interface.
"""

from typing import List, Optional

from storerate.domain.repositories.base import BaseRepository
from storerate.domain.models.store_rating import StoreRating


class StoreRatingRepository(BaseRepository[StoreRating]):
    """Interface for StoreRating-specific operations."""

    def recent(self, store_id: int | None = None, limit: int | None = None) -> List[StoreRating]:
        """Ratings newest first, optionally for one store."""
        ...

    def by_value(self, value: int, store_id: int | None = None) -> List[StoreRating]:
        """Ratings with exactly this value."""
        ...

    def get_for(self, user_id: int, store_id: int) -> Optional[StoreRating]:
        """The rating a user gave a store, if any."""
        ...

    def rating_exists(self, user_id: int, store_id: int, exclude_id: int | None = None) -> bool:
        """Whether the user already rated the store."""
        ...

    def for_user(self, user_id: int) -> List[StoreRating]:
        """All ratings written by the user."""
        ...
