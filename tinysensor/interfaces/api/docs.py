"""API documentation routes, served only to authenticated callers."""

from fastapi import APIRouter, Depends, Request
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import JSONResponse

from tinysensor.interfaces.api.deps import get_current_principal

OPENAPI_URL = "/openapi.json"

router = APIRouter(
    include_in_schema=False,
    dependencies=[Depends(get_current_principal)],
)


@router.get(OPENAPI_URL)
def openapi_schema(request: Request):
    return JSONResponse(request.app.openapi())


@router.get("/docs")
def swagger_ui(request: Request):
    return get_swagger_ui_html(openapi_url=OPENAPI_URL, title=f"{request.app.title} - Docs")


@router.get("/redoc")
def redoc(request: Request):
    return get_redoc_html(openapi_url=OPENAPI_URL, title=f"{request.app.title} - ReDoc")
