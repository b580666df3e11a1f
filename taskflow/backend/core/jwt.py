# taskflow/backend/core/jwt.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from uuid import UUID

from jose import JWTError, jwt

from taskflow.backend.core.config import settings


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def create_access_token(
    sub: UUID | str,
    extra: Dict[str, Any] | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """
    user_id(sub)로 JWT Access Token을 발급한다.
    extra 는 name/email 처럼 클라이언트가 디코딩해서 쓰는 값.
    """
    now = _utcnow()
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload: Dict[str, Any] = {"sub": str(sub), "typ": "access"}
    if extra:
        payload.update(extra)
    payload["iat"] = int(now.timestamp())
    payload["exp"] = int(expire.timestamp())
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    유효한 Access Token이면 payload(dict)를 반환,
    서명 불일치·만료·type 오류가 나면 JWTError를 던진다.
    """
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    if payload.get("typ") != "access":
        raise JWTError("Invalid token type")
    return payload


def decode_access_token(token: str) -> Dict[str, Any] | None:
    """Same as verify_access_token but returns None on failure."""
    try:
        return verify_access_token(token)
    except JWTError:
        return None
