"""
SQLAlchemy Implementation of DbUser Repository.
"""

from typing import List, Optional

from sqlalchemy import func

from tinysensor.domain.models.db_user import DbUser
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyDbUserRepository(SQLAlchemyRepository[DbUser], DbUserRepository):
    """DbUser repository implementation using SQLAlchemy."""

    def find_by_username(self, username: str) -> List[DbUser]:
        return self.db.query(DbUser).filter(DbUser.username == username).order_by(DbUser.id).all()

    def is_user_valid(self, username: str, password: str) -> bool:
        count = (
            self.db.query(func.count(DbUser.id))
            .filter(DbUser.username == username, DbUser.password == password)
            .scalar()
        )
        return (count or 0) > 0

    def username_exists(self, username: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(func.count(DbUser.id)).filter(DbUser.username == username)
        if exclude_id is not None:
            query = query.filter(DbUser.id != exclude_id)
        return (query.scalar() or 0) > 0
