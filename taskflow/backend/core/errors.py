"""Error taxonomy shared by services and routers.

Services raise these; ``taskflow.backend.main`` registers a single handler that
renders them as ``{"detail": ...}`` with the matching status code.
"""
from __future__ import annotations

from typing import Dict, Optional


class TaskflowError(Exception):
    status_code: int = 500
    default_detail: str = "Server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class Unauthenticated(TaskflowError):
    status_code = 401
    default_detail = "Invalid or expired token"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class ValidationError(TaskflowError):
    status_code = 422
    default_detail = "Invalid input"


class NotFound(TaskflowError):
    # Raised both for missing records and for records owned by someone else.
    status_code = 404
    default_detail = "Not found"


class Conflict(TaskflowError):
    status_code = 409
    default_detail = "Conflict"


class ServerError(TaskflowError):
    status_code = 500
    default_detail = "Server error"
