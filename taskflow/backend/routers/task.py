# taskflow/backend/routers/task.py
from uuid import UUID

from fastapi import APIRouter, Depends, status

from taskflow.backend.dependencies.auth import get_owner_scope
from taskflow.backend.schemas.task import (
    Message,
    TaskCreate,
    TaskCreated,
    TaskRead,
    TaskUpdate,
)
from taskflow.backend.services import tasks as task_service
from taskflow.backend.services.access import OwnerScope

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("/", response_model=list[TaskRead])
def get_all_tasks(scope: OwnerScope = Depends(get_owner_scope)):
    return [TaskRead.from_model(t) for t in task_service.list_tasks(scope)]


@router.post("/", response_model=TaskCreated, status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskCreate, scope: OwnerScope = Depends(get_owner_scope)):
    task = task_service.create_task(scope, payload)
    return TaskCreated(task=TaskRead.from_model(task))


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task_id: UUID, scope: OwnerScope = Depends(get_owner_scope)):
    return TaskRead.from_model(task_service.get_task(scope, task_id))


@router.patch("/{task_id}", response_model=TaskRead)
@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: UUID,
    payload: TaskUpdate,
    scope: OwnerScope = Depends(get_owner_scope),
):
    return TaskRead.from_model(task_service.update_task(scope, task_id, payload))


@router.delete("/{task_id}", response_model=Message)
def delete_task(task_id: UUID, scope: OwnerScope = Depends(get_owner_scope)):
    task_service.delete_task(scope, task_id)
    return Message(message="Task deleted successfully")
