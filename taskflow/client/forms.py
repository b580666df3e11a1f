"""Login / registration form helpers."""
from __future__ import annotations

import re
from typing import Optional

from taskflow.backend.core.errors import ValidationError
from taskflow.backend.services.auth_service import validate_registration
from taskflow.client.api import ApiError, TaskflowClient


def password_strength(password: str) -> str:
    if len(password) < 6:
        return "Weak"
    if re.search(r"[A-Z]", password) and re.search(r"[0-9]", password) and len(password) >= 8:
        return "Strong"
    return "Medium"


def registration_error(name: str, email: str, password: str) -> Optional[str]:
    """First problem with the form, or None; same rules the server applies."""
    try:
        validate_registration(name, email, password)
    except ValidationError as exc:
        return exc.detail
    return None


def submit_registration(api: TaskflowClient, name: str, email: str, password: str) -> Optional[str]:
    """Returns an error message, or None once the account exists."""
    error = registration_error(name, email, password)
    if error:
        return error
    try:
        api.register(name, email, password)
    except ApiError as exc:
        return exc.message or "Registration failed"
    return None


def submit_login(api: TaskflowClient, email: str, password: str) -> Optional[str]:
    if not email.strip() or not password:
        return "Email and password are required"
    try:
        api.login(email, password)
    except ApiError as exc:
        return exc.message or "Login failed"
    return None
