"""
DbUser Repository Interface.
Lookups used by the CRUD API and by the login provider.
"""

from typing import List, Optional

from tinysensor.domain.repositories.base import BaseRepository
from tinysensor.domain.models.db_user import DbUser


class DbUserRepository(BaseRepository[DbUser]):
    """Interface for DbUser-specific operations."""

    def find_by_username(self, username: str) -> List[DbUser]:
        """Accounts whose username equals the given text."""
        ...

    def is_user_valid(self, username: str, password: str) -> bool:
        """True when an account matches both username and password exactly."""
        ...

    def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        """True when another account already uses the username."""
        ...
