"""Task ordering and filtering.

The store sort and the in-memory sort must agree, so both are built here from
the same rank mapping:

1. priority rank, descending (High=3, Medium=2, Low=1, unknown=Medium)
2. due date, ascending; tasks without one go after every task that has one
3. created_at, descending

Anything still tied keeps the order the store (or the input list) had.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from sqlalchemy import case

from taskflow.backend.core.priority import DEFAULT_RANK, PRIORITY_RANK, priority_rank
from taskflow.backend.models.task import Task

_EPOCH = datetime(1970, 1, 1)


class StatusFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


def task_order_by() -> Tuple[Any, ...]:
    """ORDER BY clauses for a task listing."""
    rank = case(PRIORITY_RANK, value=Task.priority, else_=DEFAULT_RANK)
    no_due_date = case((Task.due_date.is_(None), 1), else_=0)
    return (
        rank.desc(),
        no_due_date.asc(),
        Task.due_date.asc(),
        Task.created_at.desc(),
    )


def _to_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _seconds(value: Optional[datetime]) -> float:
    if value is None:
        return 0.0
    return (value - _EPOCH).total_seconds()


def task_sort_key(task: Any) -> Tuple[int, int, float, float]:
    """In-memory equivalent of ``task_order_by`` for one task."""
    due = _to_datetime(getattr(task, "due_date", None))
    created = _to_datetime(getattr(task, "created_at", None))
    return (
        -priority_rank(getattr(task, "priority", None)),
        1 if due is None else 0,
        _seconds(due),
        -_seconds(created),
    )


def sort_tasks(tasks: Iterable[Any]) -> List[Any]:
    # sorted() is stable, so full ties keep their incoming order
    return sorted(tasks, key=task_sort_key)


def matches_status(task: Any, status: StatusFilter | str) -> bool:
    status = StatusFilter(status)
    if status is StatusFilter.COMPLETED:
        return bool(task.completed)
    if status is StatusFilter.PENDING:
        return not task.completed
    return True


def matches_query(task: Any, query: Optional[str]) -> bool:
    if not query:
        return True
    q = query.lower()
    fields = (
        getattr(task, "title", None),
        getattr(task, "description", None),
        getattr(task, "priority", None),
    )
    for field in fields:
        if isinstance(field, Enum):
            field = field.value
        if q in (field or "").lower():
            return True
    return False


def filter_tasks(
    tasks: Iterable[Any],
    query: Optional[str] = "",
    status: StatusFilter | str = StatusFilter.ALL,
) -> List[Any]:
    """Status filter, then free-text search, then the shared sort."""
    kept = [t for t in tasks if matches_status(t, status) and matches_query(t, query)]
    return sort_tasks(kept)
