"""Field normalizers for raw punch-clock values.

All functions here are total: malformed input degrades to ``""`` (or 0 for
numbers) instead of raising.
"""
from __future__ import annotations

import re
from typing import Any

from punchsync.domain.models import NormalizedShift, RawPunchRow

NO_PUNCH = "未打卡"

_PLACEHOLDERS = {"", "undefined", "null"}
_WHITESPACE = re.compile(r"[\s　]+")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_ASCII_LETTERS = re.compile(r"^[A-Za-z]+$")


def strip_whitespace(text: Any) -> str:
    """Remove every whitespace character, full-width space included."""
    if text is None:
        return ""
    return _WHITESPACE.sub("", str(text))


def clean_for_comparison(text: Any) -> str:
    """Canonical key for equality checks only; never display this."""
    return strip_whitespace(text).lower()


def normalize_time(text: Any) -> str:
    """Return a zero-padded ``HH:MM`` or ``""`` when there is no usable punch.

    ``"2024/3/5 9:05:00"`` -> ``"09:05"``; ``"00:00"`` counts as no punch.
    """
    if text is None:
        return ""
    t = str(text).strip()
    if t in _PLACEHOLDERS or t == "00:00":
        return ""
    if " " in t:
        last = t.split(" ")[-1]
        if ":" in last:
            t = last
    if "T" in t:
        head, _, tail = t.partition("T")
        if "-" in head and ":" in tail:
            t = tail
    parts = t.split(":")
    if len(parts) < 2:
        return ""
    return f"{parts[0].zfill(2)}:{parts[1].zfill(2)}"


def normalize_date(text: Any, day_first: bool = False) -> str:
    """Return ``YYYY-MM-DD`` or ``""``.

    Accepts ``/`` or ``-`` separators and drops any time suffix. A trailing
    four-digit year is read month-first unless ``day_first`` is set.
    """
    if text is None:
        return ""
    d = str(text).strip()
    if d in _PLACEHOLDERS:
        return ""
    if " " in d:
        d = d.split(" ")[0]
    if "T" in d:
        d = d.split("T")[0]
    parts = d.replace("/", "-").split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return ""

    if len(parts[0]) == 4:
        year, month, day = parts
    elif len(parts[2]) == 4:
        if day_first:
            day, month, year = parts
        else:
            month, day, year = parts
    else:
        return ""
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def format_name(name: str) -> str:
    """Put a two-part name surname first.

    Western names keep a space ("John Doe" -> "Doe John"); anything else is
    joined without one ("小明 王" -> "王小明").
    """
    tokens = name.strip().split()
    if len(tokens) != 2:
        return name
    given, family = tokens
    if _ASCII_LETTERS.match(given) and _ASCII_LETTERS.match(family):
        return f"{family} {given}"
    return f"{family}{given}"


def coerce_minutes(value: Any) -> int:
    """Leading integer of *value*, floored at 0. Non-numeric input gives 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if value != value:  # NaN
            return 0
        return max(0, int(value))
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(0, int(match.group(1)))


def coerce_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip().replace(",", ""))
    except ValueError:
        return 0.0
    if number != number or number in (float("inf"), float("-inf")):
        return 0.0
    return number


def normalize_row(raw: RawPunchRow, day_first: bool = False) -> NormalizedShift:
    return NormalizedShift(
        employee_name=(raw.employee_name or "").strip(),
        date=normalize_date(raw.date, day_first=day_first),
        start=normalize_time(raw.start),
        end=normalize_time(raw.end),
        raw_start=raw.start or "",
        raw_end=raw.end or "",
        break_minutes=coerce_minutes(raw.break_minutes),
        notes=(raw.notes or "").strip(),
    )
