"""DbUser service — manage the accounts allowed to log in."""

from typing import List, Optional

import structlog
from sqlalchemy.exc import IntegrityError

from tinysensor.core.exceptions import DuplicateEntityException, EntityNotFoundException
from tinysensor.domain.models.db_user import DbUser
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.domain.schemas.db_user import DbUserBase

logger = structlog.get_logger(__name__)


def register_db_user(repo: DbUserRepository, dto: DbUserBase) -> DbUser:
    try:
        db_user = repo.create(dto)
    except IntegrityError:
        repo.rollback()
        raise DuplicateEntityException("DbUser")
    logger.info("DbUser registered", username=db_user.username)
    return db_user


def get_db_user(repo: DbUserRepository, db_user_id: int) -> DbUser:
    db_user = repo.get_by_id(db_user_id)
    if db_user is None:
        raise EntityNotFoundException("DbUser", db_user_id)
    return db_user


def list_db_users(repo: DbUserRepository) -> List[DbUser]:
    return repo.list()


def find_db_users_by_username(repo: DbUserRepository, username: str) -> List[DbUser]:
    db_users = repo.find_by_username(username)
    if not db_users:
        raise EntityNotFoundException("DbUser")
    return db_users


def username_exists(repo: DbUserRepository, username: str, exclude_id: Optional[int] = None) -> bool:
    return repo.username_exists(username, exclude_id)


def update_db_user(repo: DbUserRepository, db_user_id: int, dto: DbUserBase) -> DbUser:
    db_user = repo.get_by_id(db_user_id, for_update=True)
    if db_user is None:
        repo.rollback()
        raise EntityNotFoundException("DbUser", db_user_id)
    try:
        db_user = repo.update(db_user, dto)
    except IntegrityError:
        repo.rollback()
        raise DuplicateEntityException("DbUser")
    logger.info("DbUser updated", db_user_id=db_user_id)
    return db_user


def delete_db_user(repo: DbUserRepository, db_user_id: int) -> DbUser:
    db_user = repo.get_by_id(db_user_id, for_update=True)
    if db_user is None:
        repo.rollback()
        raise EntityNotFoundException("DbUser", db_user_id)
    repo.delete(db_user)
    logger.info("DbUser deleted", db_user_id=db_user_id)
    return db_user
