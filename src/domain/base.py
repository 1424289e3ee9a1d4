"""Shared base for persisted entities"""

import uuid
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel


def generate_uuid() -> uuid.UUID:
    return uuid.uuid4()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert to an aware UTC datetime, reading naive values as UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp column

    Values are bound as aware UTC datetimes. SQLite stores them without an
    offset, so UTC is attached again on load.
    """

    impl = DateTime
    cache_ok = True

    def __init__(self, **kwargs):
        kwargs.setdefault("timezone", True)
        super().__init__(**kwargs)

    def process_bind_param(self, value, dialect):
        return as_utc(value)

    def process_result_value(self, value, dialect):
        return as_utc(value)


class BaseModel(SQLModel):
    """Base class for all table models of the reporting service"""
    pass
