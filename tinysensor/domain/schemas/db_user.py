"""Pydantic schemas for database accounts and the login form."""

from pydantic import BaseModel
from typing import Optional


class DbUserBase(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

    model_config = {"from_attributes": True}


class DbUserWrite(DbUserBase):
    id: Optional[int] = None


class DbUserRead(DbUserBase):
    id: int


class Principal(BaseModel):
    """Authenticated identity attached to a session. Carries no authorities."""
    username: str
