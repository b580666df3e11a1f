from sqlmodel import Field
from uuid import UUID, uuid4

from taskflow.backend.models.common import Timestamps


class Category(Timestamps, table=True):
    __tablename__ = "category"

    category_id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(index=True, foreign_key="user.user_id")
    name: str
