"""
Generic repository over a SQLAlchemy session.

Repositories stage changes on the session; `save()` is the explicit commit.
"""

from __future__ import annotations
from typing import Any, Generic, Optional, Sequence, TypeVar
from sqlalchemy import select, Select
from sqlalchemy.orm import Session

from core.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self._db = db

    def _base_query(self) -> Select:
        """Base SELECT, override to add eager loading or ordering."""
        return select(self.model)

    def get_all(self) -> Sequence[ModelT]:
        return list(self._db.scalars(self._base_query()).unique())

    def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        pk = self.model.__mapper__.primary_key[0]
        statement = self._base_query().where(pk == entity_id)
        return self._db.scalars(statement).unique().first()

    def add(self, entity: ModelT) -> None:
        self._db.add(entity)

    def update(self, entity: ModelT) -> None:
        self._db.merge(entity)

    def delete(self, entity_id: Any) -> None:
        entity = self._db.get(self.model, entity_id)
        if entity:
            self._db.delete(entity)

    def save(self) -> None:
        self._db.commit()


def next_sequential_id(db: Session, column, prefix: str, width: int = 3) -> str:
    """Next id of the form PREFIX + zero padded number, e.g. AC001, AC002."""
    numbers = [
        int(value[len(prefix):])
        for value in db.scalars(select(column).where(column.like(f"{prefix}%")))
        if value[len(prefix):].isdigit()
    ]
    return f"{prefix}{max(numbers, default=0) + 1:0{width}d}"
