"""
User Repository Interface.
"""

from typing import List

from tinysensor.domain.repositories.base import BaseRepository
from tinysensor.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def find_by_lastname_prefix(self, prefix: str) -> List[User]:
        """Users whose lastname starts with the given text."""
        ...
