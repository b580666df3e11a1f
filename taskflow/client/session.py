"""Client-side session state.

``SessionContext`` is created explicitly and handed to whatever needs it.
Its lifecycle: ``hydrate()`` from the persisted token on startup, then
``login()`` / ``logout()`` transitions, each of which also writes to the
``TokenStore``. An expired token is dropped as soon as it is noticed.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from jose import JWTError, jwt

log = logging.getLogger(__name__)


class TokenStore:
    """Persists the raw access token in a single file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: Optional[str]
    email: Optional[str]
    expires_at: float


def _read_user(token: str) -> SessionUser:
    # signature is the server's job; the client only needs the claims
    claims = jwt.get_unverified_claims(token)
    if "sub" not in claims or "exp" not in claims:
        raise JWTError("token is missing sub/exp")
    return SessionUser(
        id=str(claims["sub"]),
        name=claims.get("name"),
        email=claims.get("email"),
        expires_at=float(claims["exp"]),
    )


class SessionContext:
    def __init__(
        self,
        store: TokenStore,
        *,
        clock: Callable[[], float] = time.time,
        on_change: Optional[Callable[["SessionContext"], None]] = None,
    ):
        self.store = store
        self.clock = clock
        self.on_change = on_change
        self.token: Optional[str] = None
        self.user: Optional[SessionUser] = None

    def hydrate(self) -> None:
        token = self.store.load()
        if not token:
            return
        try:
            user = _read_user(token)
        except JWTError:
            log.info("persisted token unreadable, clearing it")
            self.logout()
            return
        if self._expired(user):
            log.info("persisted token expired, clearing it")
            self.logout()
            return
        self.token, self.user = token, user

    def login(self, token: str) -> SessionUser:
        user = _read_user(token)
        self.store.save(token)
        self.token, self.user = token, user
        self._notify()
        return user

    def logout(self) -> None:
        self.store.clear()
        self.token, self.user = None, None
        self._notify()

    @property
    def is_authenticated(self) -> bool:
        if self.user is None:
            return False
        if self._expired(self.user):
            self.logout()
            return False
        return True

    def _expired(self, user: SessionUser) -> bool:
        return user.expires_at <= self.clock()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)
