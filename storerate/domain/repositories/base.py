"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for lookups and staged writes. Writes go through the services."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self, skip: int = 0, limit: int = 100) -> List[T]:
        """List entities with pagination."""
        ...

    # Unit-of-work helpers: stage changes, then commit once.

    def add(self, db_obj: T) -> T:
        """Stage and flush an entity without committing."""
        ...

    def remove(self, db_obj: T) -> None:
        """Stage and flush a deletion without committing."""
        ...

    def reset(self, db_obj: T) -> None:
        """Discard unsaved changes by reloading the entity."""
        ...

    def commit(self) -> None:
        ...
