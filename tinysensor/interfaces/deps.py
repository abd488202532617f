"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from tinysensor.infrastructure.database import get_db
from tinysensor.domain.models.user import User
from tinysensor.domain.models.device import Device
from tinysensor.domain.models.db_user import DbUser
from tinysensor.domain.repositories.user_repository import UserRepository
from tinysensor.domain.repositories.device_repository import DeviceRepository
from tinysensor.domain.repositories.db_user_repository import DbUserRepository
from tinysensor.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from tinysensor.infrastructure.repositories.device_repository import SQLAlchemyDeviceRepository
from tinysensor.infrastructure.repositories.db_user_repository import SQLAlchemyDbUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_device_repository(db: Session = Depends(get_db)) -> DeviceRepository:
    """Get device repository instance."""
    return SQLAlchemyDeviceRepository(db, Device)


def get_db_user_repository(db: Session = Depends(get_db)) -> DbUserRepository:
    """Get database account repository instance."""
    return SQLAlchemyDbUserRepository(db, DbUser)
