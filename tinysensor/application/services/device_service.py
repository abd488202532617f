"""Device service — create, look up, replace and remove devices."""

from typing import List

import structlog
from sqlalchemy.exc import IntegrityError

from tinysensor.core.exceptions import DuplicateEntityException, EntityNotFoundException
from tinysensor.domain.models.device import Device
from tinysensor.domain.repositories.device_repository import DeviceRepository
from tinysensor.domain.schemas.device import DeviceBase

logger = structlog.get_logger(__name__)


def create_device(repo: DeviceRepository, dto: DeviceBase) -> Device:
    try:
        device = repo.create(dto)
    except IntegrityError:
        repo.rollback()
        raise DuplicateEntityException("Device")
    logger.info("Device created", device_id=device.id, mac=device.mac)
    return device


def get_device(repo: DeviceRepository, device_id: int) -> Device:
    device = repo.get_by_id(device_id)
    if device is None:
        raise EntityNotFoundException("Device", device_id)
    return device


def list_devices(repo: DeviceRepository) -> List[Device]:
    return repo.list()


def find_devices_by_model(repo: DeviceRepository, model: str) -> List[Device]:
    """Devices whose model starts with ``model``; an empty result is an error."""
    devices = repo.find_by_model_prefix(model)
    if not devices:
        raise EntityNotFoundException("Device")
    return devices


def update_device(repo: DeviceRepository, device_id: int, dto: DeviceBase) -> Device:
    device = repo.get_by_id(device_id, for_update=True)
    if device is None:
        repo.rollback()
        raise EntityNotFoundException("Device", device_id)
    try:
        device = repo.update(device, dto)
    except IntegrityError:
        repo.rollback()
        raise DuplicateEntityException("Device")
    logger.info("Device updated", device_id=device_id)
    return device


def delete_device(repo: DeviceRepository, device_id: int) -> Device:
    device = repo.get_by_id(device_id, for_update=True)
    if device is None:
        repo.rollback()
        raise EntityNotFoundException("Device", device_id)
    repo.delete(device)
    logger.info("Device deleted", device_id=device_id)
    return device
