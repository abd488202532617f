"""
Shared pytest fixtures for tinysensor tests.
Points the application at a private in-memory SQLite database before import.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test_secret_key_for_testing_only"
os.environ["DEFAULT_DBUSER_USERNAME"] = "admin"
os.environ["DEFAULT_DBUSER_PASSWORD"] = "Admin1234"
os.environ["ENFORCE_PASSWORD_POLICY"] = "false"
os.environ["LOG_FILE"] = ""

import pytest

from tinysensor.infrastructure.database import Base, SessionLocal, engine
from tinysensor.domain.models.user import User
from tinysensor.domain.models.device import Device
from tinysensor.domain.models.db_user import DbUser
from tinysensor.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from tinysensor.infrastructure.repositories.device_repository import SQLAlchemyDeviceRepository
from tinysensor.infrastructure.repositories.db_user_repository import SQLAlchemyDbUserRepository

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Admin1234"


@pytest.fixture
def db_session():
    """Fresh schema and session per test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def user_repo(db_session):
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def device_repo(db_session):
    return SQLAlchemyDeviceRepository(db_session, Device)


@pytest.fixture
def db_user_repo(db_session):
    return SQLAlchemyDbUserRepository(db_session, DbUser)


@pytest.fixture
def client():
    """Anonymous client running the full app lifespan on an empty database."""
    from fastapi.testclient import TestClient
    from tinysensor.main import app

    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def auth_client(client):
    """Client holding a logged-in session for the seeded admin account."""
    response = client.post(
        "/login",
        data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 302
    return client
