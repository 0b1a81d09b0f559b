"""Coerce the accepted raw-data shapes into a list of keyed rows."""
from __future__ import annotations

import csv
import io
from typing import Any

from punchsync.domain.exceptions import FormatError
from punchsync.timesheet.normalize import strip_whitespace


def _column_letter(index: int) -> str:
    letters = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        letters = chr(65 + rem) + letters
    return letters


def _rows_from_table(table: list[list[Any]]) -> list[dict[str, Any]]:
    headers = [strip_whitespace(h) or _column_letter(i) for i, h in enumerate(table[0])]
    rows: list[dict[str, Any]] = []
    for line in table[1:]:
        if not isinstance(line, list):
            raise FormatError("table rows must all be arrays")
        rows.append({h: (line[i] if i < len(line) else None) for i, h in enumerate(headers)})
    return rows


def _rows_from_array(items: list[Any]) -> list[dict[str, Any]]:
    if not items:
        return []
    if isinstance(items[0], list):
        return _rows_from_table(items)
    if all(isinstance(item, dict) for item in items):
        return [dict(item) for item in items]
    raise FormatError("array must hold either a header table or row objects")


def rows_from_payload(payload: Any) -> list[dict[str, Any]]:
    """Accept a 2-D table with a header row, a list of row objects, or ``{"data": [...]}``."""
    if isinstance(payload, list):
        return _rows_from_array(payload)
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return _rows_from_array(payload["data"])
    raise FormatError("unrecognized data format: expected a table, a row list or a 'data' envelope")


def rows_from_delimited(text: str) -> list[dict[str, Any]]:
    """Parse a comma, tab or semicolon separated blob whose first line is the header."""
    text = text.lstrip("﻿")
    if not text.strip():
        return []
    sample = text[:4096]
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=",\t;")
    except csv.Error:
        dialect = csv.excel
    table = [line for line in csv.reader(io.StringIO(text), dialect) if any(c.strip() for c in line)]
    if not table:
        return []
    return _rows_from_table(table)
