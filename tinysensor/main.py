"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tinysensor.config import get_settings
from tinysensor.infrastructure.database import engine, Base, SessionLocal
from tinysensor.core.logging import configure_logging
from tinysensor.core.middleware import setup_middleware
from tinysensor.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from tinysensor.domain.models.user import User
from tinysensor.domain.models.device import Device
from tinysensor.domain.models.db_user import DbUser

# Import routers
from tinysensor.interfaces.api.auth import router as auth_router
from tinysensor.interfaces.api.users import router as users_router
from tinysensor.interfaces.api.devices import router as devices_router
from tinysensor.interfaces.api.db_users import router as db_users_router
from tinysensor.interfaces.api.docs import router as docs_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Tiny Sensor Manager...", env=settings.ENVIRONMENT)

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    # Make sure somebody can log in on a fresh database
    from tinysensor.infrastructure.repositories.db_user_repository import SQLAlchemyDbUserRepository
    from tinysensor.application.services.auth_service import ensure_default_db_user
    db = SessionLocal()
    try:
        ensure_default_db_user(
            SQLAlchemyDbUserRepository(db, DbUser),
            settings.DEFAULT_DBUSER_USERNAME,
            settings.DEFAULT_DBUSER_PASSWORD,
        )
    finally:
        db.close()

    yield

    logger.info("Tiny Sensor Manager stopped")


app = FastAPI(
    title="Tiny Sensor Manager",
    description="API Backend — users, devices and database accounts",
    version="1.0.0",
    lifespan=lifespan,
    # Served by the docs router behind login
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(devices_router)
app.include_router(db_users_router)
app.include_router(docs_router)


@app.get("/health")
def health():
    return {"status": "healthy"}
