"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List

from tinysensor.domain.models.user import User
from tinysensor.domain.repositories.user_repository import UserRepository
from tinysensor.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def find_by_lastname_prefix(self, prefix: str) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.lastname.startswith(prefix, autoescape=True))
            .order_by(User.id)
            .all()
        )
