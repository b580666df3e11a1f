from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session

from taskflow.backend.dependencies.auth import get_current_user
from taskflow.backend.schemas.auth import UserRead
from taskflow.backend.services.auth_service import get_user
from taskflow.db.session import get_session

user_router = APIRouter(tags=["users"])


@user_router.get("/me", response_model=UserRead)
def get_me(user_id: UUID = Depends(get_current_user), db: Session = Depends(get_session)):
    return UserRead.from_model(get_user(db, user_id))
