"""Pydantic schemas for the Device domain."""

from pydantic import BaseModel, Field
from typing import Optional


class DeviceBase(BaseModel):
    model: Optional[str] = None
    serialnumber: Optional[str] = None
    mac: Optional[str] = None
    ip: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    model_config = {"populate_by_name": True, "from_attributes": True}


class DeviceWrite(DeviceBase):
    id: Optional[int] = None


class DeviceRead(DeviceBase):
    id: int
