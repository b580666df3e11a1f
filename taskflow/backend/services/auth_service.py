from __future__ import annotations

import logging
from uuid import UUID

from sqlmodel import Session, select

from taskflow.backend.core.config import settings
from taskflow.backend.core.errors import Conflict, NotFound, Unauthenticated, ValidationError
from taskflow.backend.core.jwt import create_access_token
from taskflow.backend.core.security import hash_password, verify_password
from taskflow.backend.models.user import User
from taskflow.backend.schemas.auth import AuthTokenModel, UserRead

log = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid email or password"


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def validate_registration(name: str, email: str, password: str) -> None:
    if not (name or "").strip():
        raise ValidationError("Name is required")
    if "@" not in _normalize_email(email):
        raise ValidationError("Enter a valid email")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.exec(select(User).where(User.email == _normalize_email(email))).first()


def register_user(db: Session, *, name: str, email: str, password: str) -> User:
    validate_registration(name, email, password)
    if get_user_by_email(db, email) is not None:
        raise Conflict("Email already registered")

    user = User(
        name=name.strip(),
        email=_normalize_email(email),
        password_hash=hash_password(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info("user registered user_id=%s", user.user_id)
    return user


def authenticate(db: Session, *, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    # same error for unknown email and bad password
    if user is None or not verify_password(password, user.password_hash):
        log.info("login failed email=%s", _normalize_email(email))
        raise Unauthenticated(INVALID_CREDENTIALS)
    return user


def issue_token(user: User) -> AuthTokenModel:
    access_token = create_access_token(
        user.user_id, extra={"name": user.name, "email": user.email}
    )
    return AuthTokenModel(
        access_token=access_token,
        expires_in=60 * settings.access_token_expire_minutes,
        user=UserRead.from_model(user),
    )


def get_user(db: Session, user_id: UUID) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user
