from uuid import UUID

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from taskflow.backend.core.errors import Unauthenticated
from taskflow.backend.core.jwt import decode_access_token
from taskflow.backend.services.access import OwnerScope
from taskflow.db.session import get_session

# auto_error=False: a missing/non-Bearer header comes through as None
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def get_current_user(token: str | None = Depends(oauth2_scheme)) -> UUID:
    """Strict auth dependency; returns the requester's user_id or raises."""
    if not token:
        raise Unauthenticated("No token provided")

    payload = decode_access_token(token)
    if payload is None or "sub" not in payload:
        raise Unauthenticated("Invalid or expired token")
    try:
        return UUID(str(payload["sub"]))
    except ValueError:
        raise Unauthenticated("Invalid or expired token")


def get_owner_scope(
    user_id: UUID = Depends(get_current_user),
    db: Session = Depends(get_session),
) -> OwnerScope:
    return OwnerScope(db, user_id)
