"""
Device Repository Interface.
"""

from typing import List

from tinysensor.domain.repositories.base import BaseRepository
from tinysensor.domain.models.device import Device


class DeviceRepository(BaseRepository[Device]):
    """Interface for Device-specific operations."""

    def find_by_model_prefix(self, prefix: str) -> List[Device]:
        """Devices whose model starts with the given text."""
        ...
