from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from taskflow.backend.core.priority import Priority
from taskflow.backend.models.common import as_utc
from taskflow.backend.models.task import Task


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: Optional[datetime] = None
    category: Optional[UUID] = None


class TaskUpdate(BaseModel):
    # every field optional; only the ones sent are applied
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None
    category: Optional[UUID] = None


class TaskRead(BaseModel):
    id: UUID
    owner: UUID
    title: str
    description: Optional[str] = None
    completed: bool = False
    # plain str so legacy/unknown tags still serialize
    priority: str = Priority.MEDIUM.value
    due_date: Optional[datetime] = None
    category: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, task: Task) -> "TaskRead":
        return cls(
            id=task.task_id,
            owner=task.user_id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=task.priority,
            due_date=as_utc(task.due_date),
            category=task.category_id,
            created_at=as_utc(task.created_at),
            updated_at=as_utc(task.updated_at),
        )


class TaskCreated(BaseModel):
    message: str = "Task created successfully"
    task: TaskRead


class Message(BaseModel):
    message: str
