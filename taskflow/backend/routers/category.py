# taskflow/backend/routers/category.py
from uuid import UUID

from fastapi import APIRouter, Depends, status

from taskflow.backend.dependencies.auth import get_owner_scope
from taskflow.backend.schemas.category import CategoryIn, CategoryRead
from taskflow.backend.schemas.task import Message
from taskflow.backend.services import categories as category_service
from taskflow.backend.services.access import OwnerScope

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/", response_model=list[CategoryRead])
def get_categories(scope: OwnerScope = Depends(get_owner_scope)):
    return [CategoryRead.from_model(c) for c in category_service.list_categories(scope)]


@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryIn, scope: OwnerScope = Depends(get_owner_scope)):
    return CategoryRead.from_model(category_service.create_category(scope, payload.name))


@router.put("/{category_id}", response_model=CategoryRead)
@router.patch("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: UUID,
    payload: CategoryIn,
    scope: OwnerScope = Depends(get_owner_scope),
):
    category = category_service.rename_category(scope, category_id, payload.name)
    return CategoryRead.from_model(category)


@router.delete("/{category_id}", response_model=Message)
def delete_category(category_id: UUID, scope: OwnerScope = Depends(get_owner_scope)):
    category_service.delete_category(scope, category_id)
    return Message(message="Category deleted")
