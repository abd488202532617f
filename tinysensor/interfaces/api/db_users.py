"""DbUsers API routes — manage the accounts allowed to log in."""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from tinysensor.config import get_settings
from tinysensor.interfaces.api.deps import get_current_principal
from tinysensor.interfaces.deps import get_db_user_repository
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.domain.schemas.db_user import DbUserRead, DbUserWrite, Principal
from tinysensor.application.validators import validate_db_user
from tinysensor.core.exceptions import BadRequestException, EntityNotFoundException, ValidationFailedException
from tinysensor.application.services.db_user_service import (
    delete_db_user,
    find_db_users_by_username,
    get_db_user,
    list_db_users,
    register_db_user,
    update_db_user,
    username_exists,
)

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/dbusers", tags=["DbUsers"])


@router.get("", response_model=List[DbUserRead])
def get_db_users_by_username(
    username: str,
    repo: DbUserRepository = Depends(get_db_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    try:
        return find_db_users_by_username(repo, username)
    except EntityNotFoundException as exc:
        raise BadRequestException(exc.message, {"username": username}) from exc


@router.get("/all", response_model=List[DbUserRead])
def get_all_db_users(
    repo: DbUserRepository = Depends(get_db_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    return list_db_users(repo)


@router.get("/{db_user_id}", response_model=DbUserRead)
def get_db_user_by_id(
    db_user_id: int,
    repo: DbUserRepository = Depends(get_db_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    return get_db_user(repo, db_user_id)


@router.post("", response_model=DbUserRead, status_code=status.HTTP_201_CREATED)
def add_db_user(
    body: DbUserWrite,
    request: Request,
    response: Response,
    repo: DbUserRepository = Depends(get_db_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    violations = validate_db_user(
        body,
        lambda name: username_exists(repo, name),
        get_settings().ENFORCE_PASSWORD_POLICY,
    )
    if violations:
        raise ValidationFailedException(violations)

    db_user = register_db_user(repo, body)
    response.headers["Location"] = str(request.url_for("get_db_user_by_id", db_user_id=db_user.id))
    return db_user


@router.put("/{db_user_id}", response_model=DbUserRead)
def replace_db_user(
    db_user_id: int,
    body: DbUserWrite,
    repo: DbUserRepository = Depends(get_db_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    # The account being replaced may keep its own username
    violations = validate_db_user(
        body,
        lambda name: username_exists(repo, name, exclude_id=db_user_id),
        get_settings().ENFORCE_PASSWORD_POLICY,
    )
    if violations:
        raise ValidationFailedException(violations)
    return update_db_user(repo, db_user_id, body)


@router.delete("/{db_user_id}", response_model=DbUserRead)
def remove_db_user(
    db_user_id: int,
    repo: DbUserRepository = Depends(get_db_user_repository),
    principal: Principal = Depends(get_current_principal),
):
    deleted = DbUserRead.model_validate(get_db_user(repo, db_user_id))
    delete_db_user(repo, db_user_id)
    logger.info("DbUser removed via API", db_user_id=db_user_id, by=principal.username)
    return deleted
