"""Pydantic schemas for the User domain."""

from pydantic import BaseModel, Field
from typing import Optional


class UserBase(BaseModel):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    model_config = {"populate_by_name": True, "from_attributes": True}


class UserWrite(UserBase):
    # Accepted for compatibility, never trusted: the path or the store decides
    id: Optional[int] = None


class UserRead(UserBase):
    id: int
