from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from taskflow.backend.schemas.auth import (
    AuthTokenModel,
    LoginRequest,
    RegisterRequest,
    UserRead,
)
from taskflow.backend.services import auth_service
from taskflow.db.session import get_session

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_session)):
    user = auth_service.register_user(
        db, name=body.name, email=body.email, password=body.password
    )
    return UserRead.from_model(user)


@auth_router.post("/login", response_model=AuthTokenModel)
def login(body: LoginRequest, db: Session = Depends(get_session)):
    user = auth_service.authenticate(db, email=body.email, password=body.password)
    return auth_service.issue_token(user)


# Swagger "Authorize" 버튼용 (username = email)
@auth_router.post("/token", response_model=AuthTokenModel)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_session),
):
    user = auth_service.authenticate(db, email=form_data.username, password=form_data.password)
    return auth_service.issue_token(user)
