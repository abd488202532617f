"""Auth routes — login form, form login, logout."""

from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from tinysensor.config import get_settings
from tinysensor.core.exceptions import BadCredentialsException, REDIRECT_URL_SESSION_KEY
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.interfaces.deps import get_db_user_repository
from tinysensor.application.services.auth_service import (
    authenticate,
    current_principal,
    remember_redirect_url,
    sign_in,
    sign_out,
)

router = APIRouter(tags=["Auth"])

LOGIN_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Tiny Sensor Manager - Login</title></head>
<body>
  <h1>Tiny Sensor Manager</h1>
  {notice}
  <form method="post" action="/login">
    <label>Username <input type="text" name="username" autofocus></label>
    <label>Password <input type="password" name="password"></label>
    <button type="submit">Sign in</button>
  </form>
</body>
</html>
"""

BAD_CREDENTIALS_NOTICE = '<p class="error" id="bad-credentials">Bad credentials</p>'
LOGGED_OUT_NOTICE = '<p class="info" id="logged-out">You have been logged out</p>'


def render_login(error: bool = False, logged_out: bool = False) -> HTMLResponse:
    notice = ""
    if error:
        notice = BAD_CREDENTIALS_NOTICE
    elif logged_out:
        notice = LOGGED_OUT_NOTICE
    return HTMLResponse(LOGIN_PAGE.format(notice=notice), status_code=status.HTTP_200_OK)


def _same_origin_referer(request: Request) -> str | None:
    referer = request.headers.get("referer")
    if not referer:
        return None
    parts = urlsplit(referer)
    if parts.netloc and parts.netloc != request.url.netloc:
        return None
    if parts.path in ("", "/login"):
        return None
    return f"{parts.path}?{parts.query}" if parts.query else parts.path


@router.get("/login", response_class=HTMLResponse)
def login_form(request: Request):
    if current_principal(request.session) is not None:
        return RedirectResponse(get_settings().DEFAULT_SUCCESS_URL, status_code=status.HTTP_302_FOUND)

    if REDIRECT_URL_SESSION_KEY not in request.session:
        remember_redirect_url(request.session, _same_origin_referer(request))

    return render_login(
        error="error" in request.query_params,
        logged_out="logout" in request.query_params,
    )


@router.post("/login")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    repo: DbUserRepository = Depends(get_db_user_repository),
):
    try:
        principal = authenticate(repo, username, password)
    except BadCredentialsException:
        return render_login(error=True)

    target = sign_in(request.session, principal, get_settings().DEFAULT_SUCCESS_URL)
    return RedirectResponse(target, status_code=status.HTTP_302_FOUND)


@router.get("/logout")
def logout(request: Request):
    sign_out(request.session)
    return RedirectResponse("/login?logout", status_code=status.HTTP_302_FOUND)


@router.get("/", response_class=HTMLResponse)
def root(request: Request):
    if current_principal(request.session) is None:
        return render_login()
    return RedirectResponse(get_settings().DEFAULT_SUCCESS_URL, status_code=status.HTTP_302_FOUND)
