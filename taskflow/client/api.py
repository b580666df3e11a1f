"""HTTP client for the TaskFlow backend.

Every non-2xx response is raised as ``ApiError``; a 401 on an authenticated
call also logs the session out.
"""
from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import UUID

import httpx

from taskflow.backend.schemas.auth import AuthTokenModel, UserRead
from taskflow.backend.schemas.category import CategoryRead
from taskflow.backend.schemas.task import TaskCreate, TaskRead, TaskUpdate
from taskflow.client.session import SessionContext

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if not isinstance(body, dict):
        return response.reason_phrase or str(body)
    detail = body.get("detail")
    if isinstance(detail, list):
        # FastAPI request-validation errors
        return "; ".join(
            str(d.get("msg", d)) if isinstance(d, dict) else str(d) for d in detail
        )
    return str(detail or body.get("message") or response.reason_phrase)


class TaskflowClient:
    def __init__(
        self,
        base_url: str,
        session: Optional[SessionContext] = None,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.session = session
        self._http = httpx.Client(base_url=base_url, transport=transport, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TaskflowClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, *, auth: bool = True, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if auth and self.session is not None and self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        try:
            response = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(0, f"Request failed: {exc}") from exc

        if response.status_code == 401 and auth and self.session is not None:
            log.info("server rejected credential, logging out")
            self.session.logout()
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            log.warning("non-JSON body from %s %s", method, path)
            raise ApiError(response.status_code, "Invalid response") from exc

    # ---- auth ----
    def register(self, name: str, email: str, password: str) -> UserRead:
        body = {"name": name, "email": email, "password": password}
        return UserRead(**self._request("POST", "/auth/register", json=body, auth=False))

    def login(self, email: str, password: str) -> AuthTokenModel:
        data = self._request(
            "POST", "/auth/login", json={"email": email, "password": password}, auth=False
        )
        token = AuthTokenModel(**data)
        if self.session is not None:
            self.session.login(token.access_token)
        return token

    def me(self) -> UserRead:
        return UserRead(**self._request("GET", "/me"))

    # ---- tasks ----
    def list_tasks(self) -> list[TaskRead]:
        return [TaskRead(**t) for t in self._request("GET", "/tasks/")]

    def create_task(self, payload: TaskCreate) -> TaskRead:
        data = self._request("POST", "/tasks/", json=payload.model_dump(mode="json"))
        return TaskRead(**data["task"])

    def update_task(self, task_id: UUID, changes: TaskUpdate) -> TaskRead:
        body = changes.model_dump(mode="json", exclude_unset=True)
        return TaskRead(**self._request("PUT", f"/tasks/{task_id}", json=body))

    def delete_task(self, task_id: UUID) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    # ---- categories ----
    def list_categories(self) -> list[CategoryRead]:
        return [CategoryRead(**c) for c in self._request("GET", "/categories/")]

    def create_category(self, name: str) -> CategoryRead:
        return CategoryRead(**self._request("POST", "/categories/", json={"name": name}))

    def rename_category(self, category_id: UUID, name: str) -> CategoryRead:
        data = self._request("PUT", f"/categories/{category_id}", json={"name": name})
        return CategoryRead(**data)

    def delete_category(self, category_id: UUID) -> None:
        self._request("DELETE", f"/categories/{category_id}")
