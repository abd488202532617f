"""
SQLAlchemy Implementation of Device Repository.
"""

from typing import List

from tinysensor.domain.models.device import Device
from tinysensor.domain.repositories.device_repository import DeviceRepository
from tinysensor.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyDeviceRepository(SQLAlchemyRepository[Device], DeviceRepository):
    """Device repository implementation using SQLAlchemy."""

    def find_by_model_prefix(self, prefix: str) -> List[Device]:
        return (
            self.db.query(Device)
            .filter(Device.model.startswith(prefix, autoescape=True))
            .order_by(Device.id)
            .all()
        )
