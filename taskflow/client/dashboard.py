from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from taskflow.backend.core.priority import Priority
from taskflow.backend.schemas.task import TaskCreate, TaskRead, TaskUpdate
from taskflow.backend.services.ordering import StatusFilter, filter_tasks
from taskflow.client.api import ApiError, TaskflowClient

log = logging.getLogger(__name__)


class ViewState(str, Enum):
    LOADING = "loading"
    FAILED = "failed"
    EMPTY = "empty"
    READY = "ready"


class ModalMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class Notice:
    level: str  # "success" | "error"
    message: str


@dataclass
class TaskDraft:
    """Form state shared by the create and edit modal."""

    title: str = ""
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: Optional[datetime] = None
    category: Optional[UUID] = None

    @classmethod
    def from_task(cls, task: TaskRead) -> "TaskDraft":
        try:
            priority = Priority(task.priority)
        except ValueError:
            priority = Priority.MEDIUM
        return cls(
            title=task.title or "",
            description=task.description or "",
            completed=bool(task.completed),
            priority=priority,
            due_date=task.due_date,
            category=task.category,
        )

    def to_create(self) -> TaskCreate:
        return TaskCreate(
            title=self.title,
            description=self.description or None,
            completed=self.completed,
            priority=self.priority,
            due_date=self.due_date,
            category=self.category,
        )

    def to_update(self) -> TaskUpdate:
        return TaskUpdate(
            title=self.title,
            # an empty box clears the description rather than storing ""
            description=self.description or None,
            completed=self.completed,
            priority=self.priority,
            due_date=self.due_date,
            category=self.category,
        )


class Dashboard:
    """
    View-model for the task list page.

    Holds the fetched tasks plus ephemeral UI state (search text, status filter,
    modal and delete-confirmation state). ``visible_tasks`` is derived on every
    access; a failed mutation leaves ``tasks`` exactly as it was.
    """

    def __init__(self, api: TaskflowClient):
        self.api = api
        self.tasks: List[TaskRead] = []
        self.loading = False
        self.load_failed = False
        self.action_loading = False

        self.query = ""
        self.status_filter = StatusFilter.ALL

        self.show_modal = False
        self.modal_mode = ModalMode.CREATE
        self.draft = TaskDraft()
        self.edit_task_id: Optional[UUID] = None

        self.task_to_delete: Optional[TaskRead] = None

        self.notices: List[Notice] = []

    # ---- derived ----
    @property
    def visible_tasks(self) -> List[TaskRead]:
        return filter_tasks(self.tasks, self.query, self.status_filter)

    @property
    def view_state(self) -> ViewState:
        if self.loading:
            return ViewState.LOADING
        if self.load_failed:
            return ViewState.FAILED
        if not self.visible_tasks:
            return ViewState.EMPTY
        return ViewState.READY

    @property
    def show_delete_confirm(self) -> bool:
        return self.task_to_delete is not None

    # ---- notices ----
    def _success(self, message: str) -> None:
        self.notices.append(Notice("success", message))

    def _error(self, message: str) -> None:
        self.notices.append(Notice("error", message))

    # ---- loading ----
    def refresh(self) -> None:
        self.loading = True
        try:
            tasks = self.api.list_tasks()
        except ApiError as exc:
            log.warning("loading tasks failed: %s", exc)
            self.load_failed = True
            self._error("Failed to load tasks")
        else:
            self.tasks = tasks
            self.load_failed = False
        finally:
            self.loading = False

    # ---- search / filter ----
    def set_query(self, query: str) -> None:
        self.query = query or ""

    def set_filter(self, status: StatusFilter | str) -> None:
        self.status_filter = StatusFilter(status)

    # ---- create / edit modal ----
    def open_create_modal(self) -> None:
        self.modal_mode = ModalMode.CREATE
        self.draft = TaskDraft()
        self.edit_task_id = None
        self.show_modal = True

    def open_edit_modal(self, task: TaskRead) -> None:
        self.modal_mode = ModalMode.EDIT
        self.draft = TaskDraft.from_task(task)
        self.edit_task_id = task.id
        self.show_modal = True

    def close_modal(self) -> None:
        self.show_modal = False
        self.draft = TaskDraft()
        self.edit_task_id = None

    def submit_modal(self) -> bool:
        if not self.draft.title.strip():
            self._error("Title is required")
            return False

        self.action_loading = True
        try:
            if self.modal_mode is ModalMode.CREATE:
                created = self.api.create_task(self.draft.to_create())
                self.tasks = [created, *self.tasks]
                self._success("Task created")
            else:
                updated = self.api.update_task(self.edit_task_id, self.draft.to_update())
                self._replace(updated)
                self._success("Task updated")
        except ApiError as exc:
            self._error(exc.message or "Operation failed")
            return False
        finally:
            self.action_loading = False

        self.close_modal()
        return True

    # ---- quick actions ----
    def toggle_complete(self, task: TaskRead) -> bool:
        try:
            updated = self.api.update_task(task.id, TaskUpdate(completed=not task.completed))
        except ApiError:
            self._error("Could not update task")
            return False
        self._replace(updated)
        self._success("Marked pending" if task.completed else "Marked completed")
        return True

    def confirm_delete(self, task: TaskRead) -> None:
        self.task_to_delete = task

    def cancel_delete(self) -> None:
        self.task_to_delete = None

    def handle_delete(self) -> bool:
        task = self.task_to_delete
        if task is None:
            return False
        self.action_loading = True
        try:
            self.api.delete_task(task.id)
        except ApiError:
            self._error("Delete failed")
            return False
        finally:
            self.action_loading = False
        self.tasks = [t for t in self.tasks if t.id != task.id]
        self.task_to_delete = None
        self._success("Task deleted")
        return True

    def _replace(self, updated: TaskRead) -> None:
        self.tasks = [updated if t.id == updated.id else t for t in self.tasks]
