"""FastAPI dependency — session and HTTP Basic authentication."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from tinysensor.application.services.auth_service import authenticate, current_principal
from tinysensor.core.exceptions import LoginRequiredException
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.domain.schemas.db_user import Principal
from tinysensor.interfaces.deps import get_db_user_repository

security = HTTPBasic(auto_error=False)


def get_current_principal(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
    repo: DbUserRepository = Depends(get_db_user_repository),
) -> Principal:
    """Resolve the caller from the session, falling back to Basic credentials.

    Anonymous browser requests are sent to the login form; GET requests have
    their URL remembered so the login can return to it.
    """
    principal = current_principal(request.session)
    if principal is not None:
        return principal

    if credentials is not None:
        return authenticate(repo, credentials.username, credentials.password)

    requested_url = None
    if request.method == "GET":
        requested_url = request.url.path
        if request.url.query:
            requested_url = f"{requested_url}?{request.url.query}"
    raise LoginRequiredException(requested_url)
