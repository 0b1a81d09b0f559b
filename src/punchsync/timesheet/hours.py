"""Worked-hours arithmetic for a single day."""
from __future__ import annotations

import math
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from punchsync.timesheet.normalize import NO_PUNCH, normalize_date


class RoundingPolicy(str, Enum):
    HUNDREDTH = "HUNDREDTH"
    WHOLE_HOUR = "WHOLE_HOUR"
    HALF_HOUR_BUCKET = "HALF_HOUR_BUCKET"


def round_half_up(value: float, places: int = 2) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def apply_rounding(hours: float, policy: RoundingPolicy) -> float:
    if policy is RoundingPolicy.WHOLE_HOUR:
        return round_half_up(hours, 0)
    if policy is RoundingPolicy.HALF_HOUR_BUCKET:
        whole = math.floor(hours)
        remainder_minutes = (hours - whole) * 60
        if remainder_minutes > 45:
            return float(whole + 1)
        if remainder_minutes > 15:
            return whole + 0.5
        return float(whole)
    return round_half_up(hours, 2)


def _instant(day: tuple[int, int, int], hhmm: str) -> datetime | None:
    parts = hhmm.split(":")
    if len(parts) < 2:
        return None
    try:
        return datetime(*day, int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def _span(date: str, start: str, end: str) -> tuple[datetime, datetime] | None:
    if not start or not end or start == NO_PUNCH or end == NO_PUNCH:
        return None
    iso = normalize_date(date)
    if not iso:
        return None
    day = tuple(int(p) for p in iso.split("-"))
    start_at = _instant(day, start)
    end_at = _instant(day, end)
    if start_at is None or end_at is None:
        return None
    if end_at <= start_at:
        end_at += timedelta(days=1)
    return start_at, end_at


def crosses_midnight(date: str, start: str, end: str) -> bool:
    span = _span(date, start, end)
    return span is not None and span[1].date() > span[0].date()


def compute_hours(
    date: str,
    start: str,
    end: str,
    break_minutes: int | float = 0,
    rounding: RoundingPolicy = RoundingPolicy.HUNDREDTH,
) -> float:
    """Hours worked between *start* and *end* on *date*, net of breaks.

    An end at or before the start is taken as the next day. Missing punches
    or unparseable values give 0; the result is never negative.
    """
    span = _span(date, start, end)
    if span is None:
        return 0.0
    start_at, end_at = span
    elapsed = (end_at - start_at).total_seconds() / 3600 - (break_minutes or 0) / 60
    return apply_rounding(max(0.0, elapsed), rounding)
