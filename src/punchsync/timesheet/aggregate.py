"""Consolidate same-day punches into one ``DailyShift`` per date."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from punchsync.domain.models import DailyShift, NormalizedShift
from punchsync.timesheet.hours import RoundingPolicy, compute_hours, crosses_midnight
from punchsync.timesheet.normalize import NO_PUNCH

logger = logging.getLogger(__name__)

NOTES_SEPARATOR = "; "

FLAG_IMPLICIT_CLOCK_OUT = "implicit_clock_out"
FLAG_OVERNIGHT = "overnight"
FLAG_MISSING_PUNCH = "missing_punch"


class EndSelection(str, Enum):
    """Which end punch represents the day when several rows carry one."""

    FIRST = "FIRST"
    LAST = "LAST"


class EndTimeFallback(str, Enum):
    """Where to take a clock-out from when no row of the day has one."""

    NEXT_START = "NEXT_START"
    LAST_START = "LAST_START"
    NONE = "NONE"


class AggregationPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    end_selection: EndSelection = EndSelection.FIRST
    fallback: EndTimeFallback = EndTimeFallback.NEXT_START
    rounding: RoundingPolicy = RoundingPolicy.HUNDREDTH


def _partition(shifts: Iterable[NormalizedShift]) -> dict[str, list[NormalizedShift]]:
    groups: dict[str, list[NormalizedShift]] = {}
    for shift in shifts:
        if not shift.date:
            continue
        groups.setdefault(shift.date, []).append(shift)
    return groups


def _resolve_end(
    rows: list[NormalizedShift], start_index: int | None, policy: AggregationPolicy,
) -> tuple[str, bool]:
    """Return the representative end time and whether it was borrowed from a start punch.

    Borrowed ends only come from rows after the one that supplied the clock-in.
    """
    ends = [r.end for r in rows if r.end and r.end != NO_PUNCH]
    if ends:
        return (ends[0] if policy.end_selection is EndSelection.FIRST else ends[-1]), False

    if start_index is None or policy.fallback is EndTimeFallback.NONE:
        return "", False
    later = [r.start for r in rows[start_index + 1:] if r.start]
    if not later:
        return "", False
    if policy.fallback is EndTimeFallback.NEXT_START:
        return later[0], True
    return later[-1], True


def _consolidate(date: str, rows: list[NormalizedShift], policy: AggregationPolicy) -> DailyShift:
    ordered = sorted(rows, key=lambda r: r.raw_start)

    start_index = next((i for i, r in enumerate(ordered) if r.start), None)
    start = ordered[start_index].start if start_index is not None else ""
    end, borrowed = _resolve_end(ordered, start_index, policy)
    total_break = sum(r.break_minutes for r in ordered)
    notes = NOTES_SEPARATOR.join(r.notes.strip() for r in rows if r.notes.strip())

    flags: list[str] = []
    if borrowed:
        flags.append(FLAG_IMPLICIT_CLOCK_OUT)
        if start and end <= start:
            logger.warning(
                "Implicit clock-out %s on %s is not after clock-in %s; punches may be out of order",
                end, date, start,
            )
    if start and end and crosses_midnight(date, start, end):
        flags.append(FLAG_OVERNIGHT)
    if not start or not end:
        flags.append(FLAG_MISSING_PUNCH)

    return DailyShift(
        date=date,
        employee_name=rows[0].employee_name,
        start=start or NO_PUNCH,
        end=end or NO_PUNCH,
        break_minutes=total_break,
        total_hours=compute_hours(date, start, end, total_break, rounding=policy.rounding),
        notes=notes,
        flags=tuple(flags),
    )


def group_by_date(
    shifts: Iterable[NormalizedShift],
    policy: AggregationPolicy = AggregationPolicy(),
) -> list[DailyShift]:
    """One ``DailyShift`` per normalized date, in ascending date order.

    Rows without a usable date are dropped. Days with no resolvable punch are
    kept with the ``NO_PUNCH`` placeholder and zero hours.
    """
    groups = _partition(shifts)
    return [_consolidate(date, groups[date], policy) for date in sorted(groups)]
