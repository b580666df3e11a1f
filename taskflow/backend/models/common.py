from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    # naive values are taken to already be UTC (sqlite hands them back that way)
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_column(**kwargs):
    """Field backed by a timezone-aware DateTime column."""
    return Field(sa_type=DateTime(timezone=True), **kwargs)


class Timestamps(SQLModel):
    created_at: datetime = utc_column(default_factory=utcnow)
    updated_at: datetime = utc_column(default_factory=utcnow)

    def touch(self) -> None:
        self.updated_at = utcnow()
