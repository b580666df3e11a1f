from __future__ import annotations

import logging
from typing import Any, Dict
from uuid import UUID

from taskflow.backend.core.errors import ValidationError
from taskflow.backend.core.priority import Priority
from taskflow.backend.models.category import Category
from taskflow.backend.models.common import as_utc
from taskflow.backend.models.task import Task
from taskflow.backend.schemas.task import TaskCreate, TaskUpdate
from taskflow.backend.services.access import OwnerScope
from taskflow.backend.services.ordering import task_order_by

log = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"
CATEGORY_NOT_FOUND = "Category not found"

_NOT_NULL = ("completed", "priority")


def _clean_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise ValidationError("Task title is required")
    return title.strip()


def _task_fields(scope: OwnerScope, payload: TaskCreate | TaskUpdate, *, partial: bool) -> Dict[str, Any]:
    """Map request fields onto Task columns, validating as we go."""
    data = payload.model_dump(exclude_unset=partial)
    fields: Dict[str, Any] = {}
    for key, value in data.items():
        if key == "title":
            value = _clean_title(value)
        elif key in _NOT_NULL and value is None:
            raise ValidationError(f"{key} may not be null")
        elif key == "priority":
            value = Priority(value).value
        elif key == "due_date":
            value = as_utc(value)
        elif key == "category":
            key = "category_id"
        fields[key] = value

    # store lookups only once the payload itself is valid
    category_id = fields.get("category_id")
    if category_id is not None:
        # a task may only point at one of its owner's categories
        scope.get(Category, category_id, not_found=CATEGORY_NOT_FOUND)
    return fields


def list_tasks(scope: OwnerScope) -> list[Task]:
    return scope.find(Task, *task_order_by())


def get_task(scope: OwnerScope, task_id: UUID) -> Task:
    return scope.get(Task, task_id, not_found=TASK_NOT_FOUND)


def create_task(scope: OwnerScope, payload: TaskCreate) -> Task:
    task = scope.create(Task, _task_fields(scope, payload, partial=False))
    log.info("task created task_id=%s owner=%s", task.task_id, scope.owner_id)
    return task


def update_task(scope: OwnerScope, task_id: UUID, payload: TaskUpdate) -> Task:
    task = get_task(scope, task_id)
    return scope.update(task, _task_fields(scope, payload, partial=True))


def delete_task(scope: OwnerScope, task_id: UUID) -> None:
    task = get_task(scope, task_id)
    scope.delete(task)
    log.info("task deleted task_id=%s owner=%s", task_id, scope.owner_id)
