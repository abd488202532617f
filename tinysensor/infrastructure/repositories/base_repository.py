"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session
from tinysensor.domain.repositories.base import BaseRepository
from tinysensor.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models.

    Every write commits its own transaction. A read made with ``for_update``
    opens the transaction that the following write commits, so a check and the
    write it guards land together.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def _fields(self, obj_in: Any) -> Dict[str, Any]:
        # Pydantic models dump by attribute name, which matches the mapped columns
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump()
        else:
            obj_data = dict(obj_in)
        return {
            field: value
            for field, value in obj_data.items()
            if field != "id" and hasattr(self.model, field)
        }

    def get_by_id(self, id: int, for_update: bool = False) -> Optional[ModelType]:
        query = self.db.query(self.model).filter(self.model.id == id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def list(self) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def create(self, obj_in: Any) -> ModelType:
        db_obj = self.model(**self._fields(obj_in))
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Any) -> ModelType:
        # Full replace: fields missing from the payload are cleared
        for field, value in self._fields(obj_in).items():
            setattr(db_obj, field, value)

        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ModelType) -> ModelType:
        self.db.delete(db_obj)
        self.db.commit()
        return db_obj

    def rollback(self) -> None:
        self.db.rollback()
