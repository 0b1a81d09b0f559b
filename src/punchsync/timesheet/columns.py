"""Heuristic mapping of spreadsheet headers to timesheet roles."""
from __future__ import annotations

from collections.abc import Sequence

from punchsync.domain.models import ColumnMapping
from punchsync.timesheet.normalize import clean_for_comparison

# Sheet layout used by the clock-in form: A=date, B=start, C=end, D=name, E=notes.
LETTER_KEYS: dict[str, str] = {
    "date": "A",
    "start": "B",
    "end": "C",
    "name": "D",
    "notes": "E",
}

POSITIONS: dict[str, int] = {
    "date": 0,
    "start": 1,
    "end": 2,
    "name": 3,
    "notes": 4,
}

ROLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "name": ("員工姓名", "姓名", "員工", "name"),
    "date": ("日期", "date", "timestamp", "day"),
    "start": ("上班", "starttime", "start", "clockin"),
    "end": ("下班", "endtime", "end", "clockout"),
    "notes": ("備註", "notes", "remark"),
}

BREAK_KEYWORDS: tuple[str, ...] = ("休息", "break")


def _keyword_match(keys: Sequence[str], keywords: Sequence[str], exclude: str | None = None) -> str | None:
    for key in keys:
        if key == exclude:
            continue
        cleaned = clean_for_comparison(key)
        if any(kw in cleaned for kw in keywords):
            return key
    return None


def map_columns(keys: Sequence[str]) -> ColumnMapping:
    """Resolve which physical column holds each role.

    Letter keys win over keywords, keywords over position. The break column is
    keyword-only and never the name column.
    """
    keys = list(keys)
    resolved: dict[str, str | None] = {}
    matched_by: dict[str, str] = {}

    for role in ("name", "date", "start", "end", "notes"):
        letter = LETTER_KEYS[role]
        if letter in keys:
            resolved[role] = letter
            matched_by[role] = "letter"
            continue
        key = _keyword_match(keys, ROLE_KEYWORDS[role])
        if key is not None:
            resolved[role] = key
            matched_by[role] = "keyword"
            continue
        index = POSITIONS[role]
        if index < len(keys):
            resolved[role] = keys[index]
            matched_by[role] = "position"
        else:
            resolved[role] = None

    break_key = _keyword_match(keys, BREAK_KEYWORDS, exclude=resolved["name"])
    if break_key is not None:
        matched_by["break_minutes"] = "keyword"

    return ColumnMapping(
        name=resolved["name"],
        date=resolved["date"],
        start=resolved["start"],
        end=resolved["end"],
        break_minutes=break_key,
        notes=resolved["notes"],
        matched_by=matched_by,
    )
