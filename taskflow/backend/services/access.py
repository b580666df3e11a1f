from __future__ import annotations

from typing import Any, Dict, Type, TypeVar
from uuid import UUID

from sqlmodel import Session, SQLModel, func, select

from taskflow.backend.core.errors import NotFound

M = TypeVar("M", bound=SQLModel)

# primary key column per owned model
_PK = {
    "task": "task_id",
    "category": "category_id",
}


def _pk(model: Type[SQLModel]):
    return getattr(model, _PK[model.__tablename__])


class OwnerScope:
    """
    Every task/category read and write goes through here so the
    ``user_id == owner_id`` filter is applied in exactly one place.
    """

    def __init__(self, db: Session, owner_id: UUID):
        self.db = db
        self.owner_id = owner_id

    def select(self, model: Type[M]):
        return select(model).where(model.user_id == self.owner_id)

    def find(self, model: Type[M], *order_by) -> list[M]:
        stmt = self.select(model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        return list(self.db.exec(stmt).all())

    def get(self, model: Type[M], entity_id: UUID, *, not_found: str = "Not found") -> M:
        # another owner's row is reported exactly like a missing one
        stmt = self.select(model).where(_pk(model) == entity_id)
        obj = self.db.exec(stmt).first()
        if obj is None:
            raise NotFound(not_found)
        return obj

    def count(self, model: Type[M], *criteria) -> int:
        stmt = (
            select(func.count())
            .select_from(model)
            .where(model.user_id == self.owner_id, *criteria)
        )
        return self.db.exec(stmt).one()

    def create(self, model: Type[M], fields: Dict[str, Any]) -> M:
        fields = {k: v for k, v in fields.items() if k != "user_id"}
        obj = model(**fields, user_id=self.owner_id)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def update(self, obj: M, changes: Dict[str, Any]) -> M:
        """Apply only the keys present in ``changes``."""
        for key, value in changes.items():
            if key == "user_id":
                continue
            setattr(obj, key, value)
        if hasattr(obj, "touch"):
            obj.touch()
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: M) -> None:
        self.db.delete(obj)
        self.db.commit()
