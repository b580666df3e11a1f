"""Centralized SQLModel imports to ensure metadata is populated."""

from taskflow.backend.models import user as _user  # noqa: F401
from taskflow.backend.models import category as _category  # noqa: F401
from taskflow.backend.models import task as _task  # noqa: F401
