"""Devices API routes — filter, fetch, create, replace and delete devices."""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from tinysensor.interfaces.api.deps import get_current_principal
from tinysensor.interfaces.deps import get_device_repository
from tinysensor.domain.repositories.device_repository import DeviceRepository
from tinysensor.domain.schemas.db_user import Principal
from tinysensor.domain.schemas.device import DeviceRead, DeviceWrite
from tinysensor.application.validators import validate_device
from tinysensor.core.exceptions import BadRequestException, EntityNotFoundException, ValidationFailedException
from tinysensor.application.services.device_service import (
    create_device,
    delete_device,
    find_devices_by_model,
    get_device,
    list_devices,
    update_device,
)

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api/devices", tags=["Devices"])


@router.get("", response_model=List[DeviceRead])
def get_devices_by_model(
    model: str,
    repo: DeviceRepository = Depends(get_device_repository),
    principal: Principal = Depends(get_current_principal),
):
    """Devices whose model starts with the given text."""
    try:
        return find_devices_by_model(repo, model)
    except EntityNotFoundException as exc:
        raise BadRequestException(exc.message, {"model": model}) from exc


@router.get("/all", response_model=List[DeviceRead])
def get_all_devices(
    repo: DeviceRepository = Depends(get_device_repository),
    principal: Principal = Depends(get_current_principal),
):
    return list_devices(repo)


@router.get("/{device_id}", response_model=DeviceRead)
def get_device_by_id(
    device_id: int,
    repo: DeviceRepository = Depends(get_device_repository),
    principal: Principal = Depends(get_current_principal),
):
    return get_device(repo, device_id)


@router.post("", response_model=DeviceRead, status_code=status.HTTP_201_CREATED)
def add_device(
    body: DeviceWrite,
    request: Request,
    response: Response,
    repo: DeviceRepository = Depends(get_device_repository),
    principal: Principal = Depends(get_current_principal),
):
    violations = validate_device(body)
    if violations:
        raise ValidationFailedException(violations)

    device = create_device(repo, body)
    response.headers["Location"] = str(request.url_for("get_device_by_id", device_id=device.id))
    return device


@router.put("/{device_id}", response_model=DeviceRead)
def replace_device(
    device_id: int,
    body: DeviceWrite,
    repo: DeviceRepository = Depends(get_device_repository),
    principal: Principal = Depends(get_current_principal),
):
    violations = validate_device(body)
    if violations:
        raise ValidationFailedException(violations)
    return update_device(repo, device_id, body)


@router.delete("/{device_id}", response_model=DeviceRead)
def remove_device(
    device_id: int,
    repo: DeviceRepository = Depends(get_device_repository),
    principal: Principal = Depends(get_current_principal),
):
    deleted = DeviceRead.model_validate(get_device(repo, device_id))
    delete_device(repo, device_id)
    logger.info("Device removed via API", device_id=device_id, by=principal.username)
    return deleted
