"""
Global exception handling for the application.
Standardizes error responses for API failures and the login redirect flow.
"""

from typing import Any, Dict, List, Optional, Tuple

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from tinysensor.config import get_settings

logger = structlog.get_logger(__name__)

REDIRECT_URL_SESSION_KEY = "REDIRECT_URL"


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.headers = headers
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, entity: str, id: Optional[int] = None):
        if id is None:
            message = f"No {entity} matches the given filter"
        else:
            message = f"Entity {entity} with id {id} does not exist"
        self.entity = entity
        self.id = id
        super().__init__(message, status.HTTP_404_NOT_FOUND, {"entity": entity, "id": id})


class ValidationFailedException(AppError):
    """One or more fields of a submitted record were rejected."""
    def __init__(self, violations: List[Tuple[str, str]]):
        self.violations = violations
        super().__init__(
            "Invalid input was supplied",
            status.HTTP_400_BAD_REQUEST,
            {"violations": [{"field": field, "code": code} for field, code in violations]},
        )


class DuplicateEntityException(AppError):
    """A unique column already holds the submitted value."""
    def __init__(self, entity: str):
        super().__init__(f"{entity} violates a uniqueness constraint", status.HTTP_409_CONFLICT, {"entity": entity})


class BadRequestException(AppError):
    """A request that cannot be satisfied as asked."""
    def __init__(self, message: str = "Bad request", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class BadCredentialsException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Bad credentials"):
        super().__init__(
            message,
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": 'Basic realm="tinysensor"'},
        )


class LoginRequiredException(AppError):
    """Anonymous access to a protected endpoint."""
    def __init__(self, requested_url: Optional[str] = None):
        self.requested_url = requested_url
        super().__init__("Authentication required", status.HTTP_302_FOUND)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render application errors as a JSON error envelope."""
    logger.warning(
        "Request rejected",
        code=exc.__class__.__name__,
        message=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.__class__.__name__,
                "message": exc.message,
                "details": exc.details,
                "path": request.url.path,
            }
        },
        headers=exc.headers,
    )


async def login_required_handler(request: Request, exc: LoginRequiredException) -> RedirectResponse:
    """Remember where the caller was going, then send them to the login form."""
    if exc.requested_url:
        request.session[REDIRECT_URL_SESSION_KEY] = exc.requested_url
    logger.info("Redirecting anonymous request to login", path=request.url.path)
    return RedirectResponse("/login", status_code=status.HTTP_302_FOUND)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies, bad path ids and missing query parameters are client errors."""
    logger.warning("Malformed request", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "BadRequest",
                "message": "Malformed request",
                "details": {"errors": jsonable_encoder(exc.errors())},
                "path": request.url.path,
            }
        },
    )


async def bad_argument_handler(request: Request, exc: ValueError) -> PlainTextResponse:
    logger.warning("Bad argument", message=str(exc), path=request.url.path)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)

    if get_settings().ENVIRONMENT == "production":
        message = "An unexpected error occurred. Please try again later."
    else:
        message = f"An error occurred: {exc}"
    return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app) -> None:
    """Wire every handler onto the application."""
    app.add_exception_handler(LoginRequiredException, login_required_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValueError, bad_argument_handler)
    app.add_exception_handler(Exception, global_exception_handler)
