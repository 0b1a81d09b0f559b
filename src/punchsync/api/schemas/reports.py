"""Report DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field, field_validator, model_validator
from punchsync.domain.models import ColumnMapping, MonthlyReport
from punchsync.timesheet.normalize import coerce_number
from punchsync.timesheet.report import parse_month


class ReportStatus(str, Enum):
    READY = "READY"
    NO_DATA = "NO_DATA"


class ReportRequest(BaseModel):
    """Exactly one data source; name and rate fall back to saved preferences when omitted."""

    source_url: str | None = None
    payload: Any | None = None
    delimited_text: str | None = None
    month: str
    employee_name: str | None = None
    hourly_rate: float | None = None
    remember: bool = False

    @field_validator("month")
    @classmethod
    def month_is_valid(cls, v: str) -> str:
        year, month = parse_month(v)
        return f"{year:04d}-{month:02d}"

    @field_validator("hourly_rate", mode="before")
    @classmethod
    def rate_fail_soft(cls, v: Any) -> float | None:
        if v is None:
            return None
        return coerce_number(v)

    @model_validator(mode="after")
    def one_source(self) -> "ReportRequest":
        given = [
            s for s in (self.source_url, self.payload, self.delimited_text) if s is not None
        ]
        if len(given) != 1:
            raise ValueError("provide exactly one of source_url, payload or delimited_text")
        return self


class ReportResponse(BaseModel):
    status: ReportStatus
    month: str
    employee_name: str
    report: MonthlyReport | None = None
    mapping: ColumnMapping
    detected_names: list[str] = Field(default_factory=list)
    row_count: int = 0


class PrintRequest(BaseModel):
    report: MonthlyReport
    employee_name: str = ""
    issued_on: date | None = None


class InsightRequest(BaseModel):
    report: MonthlyReport


class InsightResponse(BaseModel):
    text: str
    generated: bool
