"""Auth service — credential checks against the DbUser store and session state.

Login is a flat model: a caller is either anonymous or authenticated, with no
roles. The session keeps the principal's username and, between an anonymous
request and a successful login, the URL the caller originally asked for.
"""

from typing import MutableMapping, Optional
from urllib.parse import urlsplit

import structlog

from tinysensor.core.exceptions import BadCredentialsException, REDIRECT_URL_SESSION_KEY
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.domain.schemas.db_user import DbUserBase, Principal

logger = structlog.get_logger(__name__)

PRINCIPAL_SESSION_KEY = "principal"


def authenticate(repo: DbUserRepository, username: Optional[str], password: Optional[str]) -> Principal:
    """Exact, plaintext match of username and password."""
    if not username or not password or not repo.is_user_valid(username, password):
        logger.warning("Authentication failed", username=username)
        raise BadCredentialsException()
    return Principal(username=username)


def current_principal(session: MutableMapping) -> Optional[Principal]:
    username = session.get(PRINCIPAL_SESSION_KEY)
    if not username:
        return None
    return Principal(username=username)


def is_local_url(url: Optional[str]) -> bool:
    """Only same-origin paths may be used as a post-login target."""
    if not url:
        return False
    parts = urlsplit(url)
    return not parts.scheme and not parts.netloc and url.startswith("/") and not url.startswith("//")


def remember_redirect_url(session: MutableMapping, url: Optional[str]) -> None:
    if is_local_url(url):
        session[REDIRECT_URL_SESSION_KEY] = url


def pop_redirect_url(session: MutableMapping, default: str) -> str:
    """Read and clear the remembered URL."""
    url = session.pop(REDIRECT_URL_SESSION_KEY, None)
    return url if is_local_url(url) else default


def sign_in(session: MutableMapping, principal: Principal, default_url: str) -> str:
    """Attach the principal to a fresh session and return where to send the caller."""
    target = pop_redirect_url(session, default_url)
    session.clear()
    session[PRINCIPAL_SESSION_KEY] = principal.username
    logger.info("Login succeeded", username=principal.username)
    return target


def sign_out(session: MutableMapping) -> None:
    username = session.get(PRINCIPAL_SESSION_KEY)
    session.clear()
    if username:
        logger.info("Logout", username=username)


def ensure_default_db_user(repo: DbUserRepository, username: str, password: str) -> bool:
    """Create the bootstrap account unless it already exists. Returns True if created."""
    if not username or repo.username_exists(username):
        return False
    repo.create(DbUserBase(username=username, password=password))
    logger.info("Default DbUser created", username=username)
    return True
