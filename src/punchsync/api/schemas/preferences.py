"""Preference DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from typing import Any
from pydantic import BaseModel, field_validator
from punchsync.timesheet.normalize import coerce_number


class PreferencesRead(BaseModel):
    employee_name: str
    hourly_rate: float
    source_url: str


class PreferencesUpdate(BaseModel):
    employee_name: str | None = None
    hourly_rate: float | None = None
    source_url: str | None = None

    @field_validator("hourly_rate", mode="before")
    @classmethod
    def rate_fail_soft(cls, v: Any) -> float | None:
        if v is None:
            return None
        return coerce_number(v)
