"""User service — create, look up, replace and remove users."""

from typing import List

import structlog
from sqlalchemy.exc import IntegrityError

from tinysensor.core.exceptions import DuplicateEntityException, EntityNotFoundException
from tinysensor.domain.models.user import User
from tinysensor.domain.repositories.user_repository import UserRepository
from tinysensor.domain.schemas.user import UserBase

logger = structlog.get_logger(__name__)


def create_user(repo: UserRepository, dto: UserBase) -> User:
    """Store a new user. Any id carried by the payload is ignored."""
    try:
        user = repo.create(dto)
    except IntegrityError:
        repo.rollback()
        raise DuplicateEntityException("User")
    logger.info("User created", user_id=user.id)
    return user


def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User", user_id)
    return user


def list_users(repo: UserRepository) -> List[User]:
    return repo.list()


def find_users_by_lastname(repo: UserRepository, lastname: str) -> List[User]:
    """Users whose lastname starts with ``lastname``; an empty result is an error."""
    users = repo.find_by_lastname_prefix(lastname)
    if not users:
        raise EntityNotFoundException("User")
    return users


def update_user(repo: UserRepository, user_id: int, dto: UserBase) -> User:
    """Replace every field of an existing user."""
    user = repo.get_by_id(user_id, for_update=True)
    if user is None:
        repo.rollback()
        raise EntityNotFoundException("User", user_id)
    try:
        user = repo.update(user, dto)
    except IntegrityError:
        repo.rollback()
        raise DuplicateEntityException("User")
    logger.info("User updated", user_id=user_id)
    return user


def delete_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id, for_update=True)
    if user is None:
        repo.rollback()
        raise EntityNotFoundException("User", user_id)
    repo.delete(user)
    logger.info("User deleted", user_id=user_id)
    return user
