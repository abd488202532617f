"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int, for_update: bool = False) -> Optional[T]:
        """Get a single entity by ID, optionally locking its row."""
        ...

    def list(self) -> List[T]:
        """List every entity."""
        ...

    def create(self, obj_in: Any) -> T:
        """Insert a new entity; the store assigns the ID."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Replace every field of an existing entity."""
        ...

    def delete(self, db_obj: T) -> T:
        """Remove an entity."""
        ...

    def rollback(self) -> None:
        """Discard the pending transaction."""
        ...
