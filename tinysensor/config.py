"""Tiny Sensor Manager — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./tinysensor.db"

    # Session security
    SECRET_KEY: str = "change-me"
    SESSION_COOKIE: str = "TSMSESSION"
    SESSION_MAX_AGE: int = 1800

    # Login flow
    DEFAULT_SUCCESS_URL: str = "/api/users?lastname="
    DEFAULT_DBUSER_USERNAME: str = "admin"
    DEFAULT_DBUSER_PASSWORD: str = "Admin1234"
    ENFORCE_PASSWORD_POLICY: bool = False

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # Environment
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
