"""
Appointment aggregation — counts by creator, source, day and location.

Every dimension is tallied independently: a row without a location still
counts towards its creator, source and date. Output series are plain lists
of dicts, ready for charting or JSON.
"""
from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from appointments.data.dates import format_date, normalize_date
from appointments.data.fields import resolve_field, resolve_label
from appointments.data.filters import CallCenterMatcher, filter_rows
from appointments.data.schemas import FilterCriteria, LogicalField, Row

# dimension name -> result key
DIMENSIONS = {
    "creator": "by_creator",
    "source": "by_source",
    "date": "by_date",
    "location": "by_location",
}

_FRAME_COLUMNS = ["creator", "source", "location", "date"]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _resolve_frame(rows: Iterable[Row]) -> pd.DataFrame:
    """One line per row with its resolved creator, source, location and date."""
    records = [
        (
            resolve_label(row, LogicalField.CREATOR),
            resolve_label(row, LogicalField.SOURCE),
            resolve_label(row, LogicalField.LOCATION),
            normalize_date(resolve_field(row, LogicalField.DATE)),
        )
        for row in rows
    ]
    return pd.DataFrame.from_records(records, columns=_FRAME_COLUMNS)


def _apply_inclusion(frame: pd.DataFrame, included: Optional[Iterable[str]]) -> pd.DataFrame:
    """Drop rows whose creator is known but not in the allow-list."""
    included = list(included or [])
    if not included:
        return frame
    keep = frame["creator"].isna() | frame["creator"].isin(included)
    return frame[keep]


def _group_counts(values: pd.Series, sort: bool) -> pd.Series:
    # sort=False keeps groups in order of first appearance; None is dropped
    return values.groupby(values, sort=sort).size()


def _label_series(values: pd.Series) -> list[dict]:
    counts = _group_counts(values, sort=False)
    return [{"label": label, "count": int(n)} for label, n in counts.items()]


def _date_series(values: pd.Series) -> list[dict]:
    counts = _group_counts(values, sort=True)
    return [{"date": format_date(day), "count": int(n)} for day, n in counts.items()]


def _aggregate_frame(frame: pd.DataFrame) -> dict:
    return {
        "by_creator": _label_series(frame["creator"]),
        "by_source": _label_series(frame["source"]),
        "by_date": _date_series(frame["date"]),
        "by_location": _label_series(frame["location"]),
    }


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def aggregate(rows: Iterable[Row], included_creators: Optional[Iterable[str]] = None) -> dict:
    """Group-count rows along the four dimensions.

    If ``included_creators`` is non-empty, rows whose creator is set and not
    in it are skipped for all four dimensions.

    Returns {"by_creator", "by_source", "by_location"} as [{label, count}]
    in first-seen order, and "by_date" as [{date, count}] sorted by date.
    """
    frame = _apply_inclusion(_resolve_frame(rows), included_creators)
    return _aggregate_frame(frame)


def build_dashboard(
    rows: Iterable[Row],
    criteria: FilterCriteria | None = None,
    is_call_center: CallCenterMatcher | None = None,
) -> dict:
    """Filter, aggregate and summarise in one pass for the dashboard."""
    criteria = criteria or FilterCriteria()
    rows = list(rows)
    matched = filter_rows(rows, criteria, is_call_center)

    frame = _apply_inclusion(_resolve_frame(matched), criteria.included_creators)
    series = _aggregate_frame(frame)

    dates = frame["date"].dropna()
    summary = {
        "total_rows": len(rows),
        "matched_rows": len(matched),
        "counted_rows": int(len(frame)),
        "undated_rows": int(len(frame) - len(dates)),
        "first_date": format_date(min(dates)) if len(dates) else None,
        "last_date": format_date(max(dates)) if len(dates) else None,
    }
    return {"filters": criteria.label, **series, "summary": summary}
