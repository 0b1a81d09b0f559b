"""Turn keyed spreadsheet rows into normalized shifts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from punchsync.domain.models import ColumnMapping, NormalizedShift, RawPunchRow
from punchsync.timesheet.columns import map_columns
from punchsync.timesheet.normalize import normalize_row


@dataclass
class IngestResult:
    shifts: list[NormalizedShift] = field(default_factory=list)
    mapping: ColumnMapping = field(default_factory=ColumnMapping)


def _cell(row: dict[str, Any], key: str | None) -> Any:
    if key is None:
        return None
    return row.get(key)


def to_raw_row(row: dict[str, Any], mapping: ColumnMapping) -> RawPunchRow:
    return RawPunchRow(
        employee_name=_cell(row, mapping.name),
        date=_cell(row, mapping.date),
        start=_cell(row, mapping.start),
        end=_cell(row, mapping.end),
        break_minutes=_cell(row, mapping.break_minutes),
        notes=_cell(row, mapping.notes),
    )


def ingest_rows(rows: list[dict[str, Any]], day_first: bool = False) -> IngestResult:
    """Map columns from the first row's keys and normalize every row."""
    if not rows:
        return IngestResult()
    mapping = map_columns(list(rows[0].keys()))
    shifts = [normalize_row(to_raw_row(row, mapping), day_first=day_first) for row in rows]
    return IngestResult(shifts=shifts, mapping=mapping)
