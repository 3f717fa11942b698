"""
Date normalisation for heterogeneous appointment exports.

Accepts day/month/year strings with ``/``, ``-`` or ``.`` separators (an
optional time-of-day suffix is ignored), spreadsheet serial day numbers, and
already-decoded date cells. Everything collapses to a ``datetime.date`` whose
only text form is ``DD/MM/YYYY``.
"""
from __future__ import annotations

import datetime as dt
import math
import numbers
import re
import warnings

import numpy as np
import pandas as pd

from appointments.config import DATE_DELIMITERS, MIN_YEAR, MAX_YEAR

# Spreadsheet serials count from 1900-01-01 == 1 and include the phantom
# 29/02/1900, so serials after 59 are one day ahead.
_SERIAL_EPOCH = dt.date(1899, 12, 31)
_SERIAL_LEAP_BUG_THRESHOLD = 59

# Generic fallback only sees three numeric groups (month-first, ISO, ...);
# month words are never interpreted
_NUMERIC_DATE_RE = re.compile(r"^\d{1,4}[-/.]\d{1,2}[-/.]\d{1,4}(?:$|T\d)")


def normalize_date(raw) -> dt.date | None:
    """Convert a raw cell value to a calendar date, or None if it isn't one."""
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, dt.datetime):
        # pd.Timestamp subclasses datetime; NaT does too
        return None if pd.isna(raw) else raw.date()
    if isinstance(raw, dt.date):
        return raw

    if isinstance(raw, numbers.Real) and not isinstance(raw, np.bool_):
        if raw == 0:
            return None  # empty numeric cell, not 31/12/1899
        return excel_serial_to_date(float(raw))

    if isinstance(raw, str):
        return _parse_date_string(raw)

    return None


def excel_serial_to_date(serial: float) -> dt.date | None:
    """Spreadsheet day number -> date, reproducing the 1900 leap-year quirk."""
    if math.isnan(serial) or math.isinf(serial):
        return None
    days = math.floor(serial)
    if days > _SERIAL_LEAP_BUG_THRESHOLD:
        days -= 1
    try:
        return _SERIAL_EPOCH + dt.timedelta(days=days)
    except OverflowError:
        return None


def _parse_date_string(text: str) -> dt.date | None:
    tokens = text.split()
    if not tokens:
        return None
    token = tokens[0]

    for delim in DATE_DELIMITERS:
        parsed = _parse_day_month_year(token, delim)
        if parsed is not None:
            return parsed

    return _fallback_parse(token)


def _parse_day_month_year(token: str, delim: str) -> dt.date | None:
    parts = token.split(delim)
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
    except ValueError:
        return None

    if not (1 <= day <= 31 and 1 <= month <= 12 and MIN_YEAR <= year <= MAX_YEAR):
        return None
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def _fallback_parse(token: str) -> dt.date | None:
    if not _NUMERIC_DATE_RE.match(token):
        return None
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        ts = pd.to_datetime(token, errors="coerce")
    if pd.isna(ts):
        return None
    return ts.date()


def format_date(value: dt.date) -> str:
    """Canonical DD/MM/YYYY text form."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_date_text(text: str) -> dt.date:
    """Parse a user-supplied bound (DD/MM/YYYY or YYYY-MM-DD).

    Raises ValueError on anything else, for use at the API/CLI boundary.
    """
    text = (text or "").strip()
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    parsed = _parse_date_string(text)
    if parsed is None:
        raise ValueError(f"Invalid date: '{text}' (expected DD/MM/YYYY or YYYY-MM-DD)")
    return parsed
