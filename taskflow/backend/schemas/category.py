from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel

from taskflow.backend.models.category import Category


class CategoryIn(BaseModel):
    name: str


class CategoryRead(BaseModel):
    id: UUID
    owner: UUID
    name: str

    @classmethod
    def from_model(cls, category: Category) -> "CategoryRead":
        return cls(id=category.category_id, owner=category.user_id, name=category.name)
