from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import delete, exists

from taskflow.backend.core.errors import Conflict, ValidationError
from taskflow.backend.models.category import Category
from taskflow.backend.models.task import Task
from taskflow.backend.services.access import OwnerScope

log = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"
CATEGORY_IN_USE = "Cannot delete category with existing tasks."


def _clean_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError("Category name is required")
    return name.strip()


def list_categories(scope: OwnerScope) -> list[Category]:
    return scope.find(Category, Category.name.asc())


def get_category(scope: OwnerScope, category_id: UUID) -> Category:
    return scope.get(Category, category_id, not_found=CATEGORY_NOT_FOUND)


def create_category(scope: OwnerScope, name: str) -> Category:
    return scope.create(Category, {"name": _clean_name(name)})


def rename_category(scope: OwnerScope, category_id: UUID, name: str) -> Category:
    name = _clean_name(name)
    category = get_category(scope, category_id)
    return scope.update(category, {"name": name})


def count_tasks_in_category(scope: OwnerScope, category_id: UUID) -> int:
    return scope.count(Task, Task.category_id == category_id)


def delete_category(scope: OwnerScope, category_id: UUID) -> None:
    """
    Delete an unreferenced category.

    The reference check lives inside the DELETE itself, so a task created
    concurrently cannot slip in between the check and the delete.
    """
    get_category(scope, category_id)

    referenced = exists().where(
        Task.user_id == scope.owner_id,
        Task.category_id == category_id,
    )
    stmt = delete(Category).where(
        Category.category_id == category_id,
        Category.user_id == scope.owner_id,
        ~referenced,
    ).execution_options(synchronize_session=False)
    result = scope.db.execute(stmt)
    if result.rowcount == 0:
        scope.db.rollback()
        # gone since the lookup above: that is a NotFound, not a blocked delete
        get_category(scope, category_id)
        log.info(
            "category delete blocked category_id=%s tasks=%d",
            category_id,
            count_tasks_in_category(scope, category_id),
        )
        raise Conflict(CATEGORY_IN_USE)
    scope.db.commit()
    log.info("category deleted category_id=%s owner=%s", category_id, scope.owner_id)
