from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from taskflow.backend.models.common import as_utc
from taskflow.backend.models.user import User


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class UserRead(BaseModel):
    id: UUID
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_model(cls, user: User) -> "UserRead":
        return cls(
            id=user.user_id,
            name=user.name,
            email=user.email,
            created_at=as_utc(user.created_at),
        )


class AuthTokenModel(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserRead
