"""
Display helpers shared by the API, CLI and Excel report.
"""
from __future__ import annotations

import pandas as pd

from appointments.config import MAX_PIE_SLICES, OTHER_LABEL


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total."""
    return safe_divide(part, total) * 100


def with_shares(series: list[dict]) -> list[dict]:
    """Copy of a {label, count} series with a 'share' percentage per entry."""
    total = sum(item["count"] for item in series)
    return [{**item, "share": round(pct_of_total(item["count"], total), 1)} for item in series]


def merge_long_tail(
    series: list[dict],
    max_slices: int = MAX_PIE_SLICES,
    other_label: str = OTHER_LABEL,
) -> list[dict]:
    """Pie-friendly copy of a {label, count} series.

    Blank labels and non-positive counts are dropped. With more than
    ``max_slices`` entries left, the largest ``max_slices - 1`` are kept
    (ties keep input order) and the remainder is summed into ``other_label``.
    The input list is not modified.
    """
    cleaned = [
        {"label": str(item["label"]).strip(), "count": int(item["count"])}
        for item in series
        if item.get("label") is not None and str(item["label"]).strip() and item.get("count", 0) > 0
    ]
    if len(cleaned) <= max_slices:
        return cleaned

    ranked = sorted(cleaned, key=lambda x: x["count"], reverse=True)
    head = ranked[: max_slices - 1]
    other = sum(item["count"] for item in ranked[max_slices - 1:])
    return head + [{"label": other_label, "count": other}]
