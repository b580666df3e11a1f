from sqlmodel import Field
from uuid import UUID, uuid4
from datetime import datetime
from typing import Optional

from taskflow.backend.core.priority import Priority
from taskflow.backend.models.common import Timestamps, utc_column


class Task(Timestamps, table=True):
    __tablename__ = "task"

    task_id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(index=True, foreign_key="user.user_id")
    title: str
    description: Optional[str] = None
    completed: bool = False
    # tag string; rank is derived, never stored
    priority: str = Field(default=Priority.MEDIUM.value)
    due_date: Optional[datetime] = utc_column(default=None)
    category_id: Optional[UUID] = Field(
        default=None, index=True, foreign_key="category.category_id"
    )
