"""Timesheet data model.

``RawPunchRow`` is the loose shape handed over by ingestion. Everything after
it is normalized, immutable and safe to share between report builds.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_MISSING_TEXT = {"undefined", "null"}


class RawPunchRow(BaseModel):
    """One clock event or clock pair as it came out of the spreadsheet."""

    model_config = ConfigDict(frozen=True)

    employee_name: str | None = None
    date: str | None = None
    start: str | None = None
    end: str | None = None
    break_minutes: int | float | str | None = None
    notes: str | None = None

    @field_validator("employee_name", "date", "start", "end", "notes", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> str | None:
        if v is None:
            return None
        text = str(v)
        if text.strip() in _MISSING_TEXT:
            return None
        return text

    @field_validator("break_minutes", mode="before")
    @classmethod
    def _as_scalar(cls, v: Any) -> int | float | str | None:
        if v is None or isinstance(v, (int, float, str)):
            return v
        return str(v)


class NormalizedShift(BaseModel):
    """A raw row after field normalization.

    ``raw_start``/``raw_end`` keep the original text; daily grouping orders
    punches by the raw start value.
    """

    model_config = ConfigDict(frozen=True)

    employee_name: str = ""
    date: str = ""
    start: str = ""
    end: str = ""
    raw_start: str = ""
    raw_end: str = ""
    break_minutes: int = Field(default=0, ge=0)
    notes: str = ""


class DailyShift(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    employee_name: str = ""
    start: str
    end: str
    break_minutes: int = Field(ge=0)
    total_hours: float = Field(ge=0)
    notes: str = ""
    flags: tuple[str, ...] = ()


class MonthlyReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: str
    hourly_rate: float
    total_hours: float
    total_pay: int
    shifts: tuple[DailyShift, ...]


class ColumnMapping(BaseModel):
    """Physical column chosen for each logical role, ``None`` when unresolved."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    date: str | None = None
    start: str | None = None
    end: str | None = None
    break_minutes: str | None = None
    notes: str | None = None
    matched_by: dict[str, str] = Field(default_factory=dict)
