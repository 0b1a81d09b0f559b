from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from sqlmodel import Field, SQLModel


class PreferenceKey(str, Enum):
    EMPLOYEE_NAME = "employee_name"
    HOURLY_RATE = "hourly_rate"
    SOURCE_URL = "source_url"


class Preference(SQLModel, table=True):
    """One persisted user setting; values are stored as plain strings."""

    key: str = Field(primary_key=True)
    value: str = ""
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
