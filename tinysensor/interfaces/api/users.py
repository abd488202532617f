"""Users API routes — filter, fetch, create, replace and delete users."""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from tinysensor.interfaces.api.deps import get_current_principal
from tinysensor.interfaces.deps import get_user_repository
from tinysensor.domain.repositories.user_repository import UserRepository
from tinysensor.domain.schemas.db_user import Principal
from tinysensor.domain.schemas.user import UserRead, UserWrite
from tinysensor.application.validators import validate_user
from tinysensor.core.exceptions import BadRequestException, EntityNotFoundException, ValidationFailedException
from tinysensor.application.services.user_service import (
    create_user,
    delete_user,
    find_users_by_lastname,
    get_user,
    list_users,
    update_user,
)

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[UserRead])
def get_users_by_lastname(
    lastname: str,
    repo: UserRepository = Depends(get_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    """Users whose lastname starts with the given text."""
    try:
        return find_users_by_lastname(repo, lastname)
    except EntityNotFoundException as exc:
        raise BadRequestException(exc.message, {"lastname": lastname}) from exc


@router.get("/all", response_model=List[UserRead])
def get_all_users(
    repo: UserRepository = Depends(get_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    return list_users(repo)


@router.get("/{user_id}", response_model=UserRead)
def get_user_by_id(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    return get_user(repo, user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def add_user(
    body: UserWrite,
    request: Request,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    violations = validate_user(body)
    if violations:
        raise ValidationFailedException(violations)

    user = create_user(repo, body)
    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=user.id))
    return user


@router.put("/{user_id}", response_model=UserRead)
def replace_user(
    user_id: int,
    body: UserWrite,
    repo: UserRepository = Depends(get_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    violations = validate_user(body)
    if violations:
        raise ValidationFailedException(violations)
    return update_user(repo, user_id, body)


@router.delete("/{user_id}", response_model=UserRead)
def remove_user(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    """Delete a user and echo the removed record."""
    deleted = UserRead.model_validate(get_user(repo, user_id))
    delete_user(repo, user_id)
    logger.info("User removed via API", user_id=user_id, by=principal.username)
    return deleted
