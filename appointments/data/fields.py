"""
Fuzzy column resolution — map unpredictable headers to logical fields.
"""
from __future__ import annotations

import re
from typing import Any, Iterable

import pandas as pd

from appointments.data.schemas import LogicalField, Row

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_key(name) -> str:
    """Drop all whitespace and lower-case, so 'Source Type' == 'sourcetype'."""
    return _WHITESPACE_RE.sub("", str(name if name is not None else "")).lower()


def keys_match(candidate: str, key) -> bool:
    """Loose header match: either normalised string contains the other."""
    cand = normalize_key(candidate)
    k = normalize_key(key)
    if not cand or not k:
        # "" is a substring of every name; a blank header must not bind
        return False
    return cand in k or k in cand


def match_column(columns: Iterable, field: LogicalField):
    """Return the first column bound to ``field``, or None.

    Candidates are tried in priority order; within a candidate, columns in
    their given order.
    """
    columns = list(columns)
    for candidate in field.candidates:
        for col in columns:
            if keys_match(candidate, col):
                return col
    return None


def resolve_field(row: Row, field: LogicalField) -> Any:
    """Value of ``field`` in ``row`` (strings trimmed), or None if absent/blank.

    Resolution runs per row: rows from the same export may still carry
    different key sets.
    """
    key = match_column(row.keys(), field)
    if key is None:
        return None
    return _clean_value(row[key])


def resolve_label(row: Row, field: LogicalField) -> str | None:
    """Resolved value as display text; integral floats lose their '.0'."""
    value = resolve_field(row, field)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def distinct_values(rows: Iterable[Row], field: LogicalField) -> list[str]:
    """Distinct non-empty labels of ``field`` in first-seen order."""
    seen: dict[str, None] = {}
    for row in rows:
        label = resolve_label(row, field)
        if label is not None:
            seen.setdefault(label, None)
    return list(seen)


def resolve_columns(columns: Iterable) -> dict[str, str | None]:
    """Which header each logical field binds to (for ingestion diagnostics)."""
    columns = list(columns)
    return {f.value: _as_name(match_column(columns, f)) for f in LogicalField}


def missing_fields(columns: Iterable) -> list[str]:
    """Logical fields with no resolvable header."""
    return [name for name, col in resolve_columns(columns).items() if col is None]


def _as_name(col) -> str | None:
    return None if col is None else str(col)


def _clean_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value
