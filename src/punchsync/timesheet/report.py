"""Monthly report assembly."""
from __future__ import annotations

import math
import re
from collections.abc import Iterable
from decimal import Decimal

from punchsync.domain.models import MonthlyReport, NormalizedShift
from punchsync.timesheet.aggregate import AggregationPolicy, group_by_date
from punchsync.timesheet.hours import round_half_up
from punchsync.timesheet.normalize import clean_for_comparison, coerce_number

_MONTH = re.compile(r"^(\d{4})-(\d{1,2})$")
_NAME_PLACEHOLDERS = {"undefined", "null"}


def parse_month(value: str) -> tuple[int, int]:
    """``"2024-03"`` -> ``(2024, 3)``. Raises ``ValueError`` on anything else."""
    match = _MONTH.match(value.strip())
    if not match:
        raise ValueError(f"month must look like YYYY-MM, got {value!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {value!r}")
    return year, month


def compute_pay(total_hours: float, hourly_rate: float) -> int:
    """Pay rounded down to the whole currency unit."""
    return math.floor(Decimal(repr(total_hours)) * Decimal(repr(hourly_rate)))


def detected_employee_names(shifts: Iterable[NormalizedShift]) -> list[str]:
    """Distinct employee names in first-seen order."""
    seen: dict[str, None] = {}
    for shift in shifts:
        name = shift.employee_name
        if name and name not in _NAME_PLACEHOLDERS:
            seen.setdefault(name, None)
    return list(seen)


def select_shifts(
    shifts: Iterable[NormalizedShift], employee_filter: str, year: int, month: int,
) -> list[NormalizedShift]:
    target = clean_for_comparison(employee_filter)
    prefix = f"{year:04d}-{month:02d}"
    return [
        s for s in shifts
        if (not target or clean_for_comparison(s.employee_name) == target)
        and s.date.startswith(prefix)
    ]


def build_report(
    shifts: Iterable[NormalizedShift],
    employee_filter: str,
    year: int,
    month: int,
    hourly_rate: float | str,
    policy: AggregationPolicy = AggregationPolicy(),
) -> MonthlyReport | None:
    """Build the report for one employee and month.

    Returns ``None`` when nothing matches; callers show diagnostics then.
    An empty *employee_filter* matches every row.
    """
    daily = group_by_date(select_shifts(shifts, employee_filter, year, month), policy)
    if not daily:
        return None

    rate = coerce_number(hourly_rate)
    total_hours = round_half_up(sum(d.total_hours for d in daily), 2)
    return MonthlyReport(
        month=f"{year:04d}-{month:02d}",
        hourly_rate=rate,
        total_hours=total_hours,
        total_pay=compute_pay(total_hours, rate),
        shifts=tuple(daily),
    )
