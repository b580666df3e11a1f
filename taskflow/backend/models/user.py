from sqlmodel import Field
from uuid import UUID, uuid4

from taskflow.backend.models.common import Timestamps


class User(Timestamps, table=True):
    __tablename__ = "user"

    user_id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str
