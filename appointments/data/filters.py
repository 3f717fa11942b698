"""
Row filtering — source, creator, date range and call-center predicates.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from appointments.config import CALL_CENTER_MARKERS, CALL_CENTER_PREFIXES
from appointments.data.dates import normalize_date
from appointments.data.fields import resolve_field, resolve_label
from appointments.data.schemas import FilterCriteria, LogicalField, Row


@dataclass(frozen=True)
class CallCenterMatcher:
    """Decides whether a creator name denotes a call-center agent.

    Pure naming heuristic: a lower-cased name matches if it contains any
    marker or starts with any prefix.
    """
    markers: tuple[str, ...] = CALL_CENTER_MARKERS
    prefixes: tuple[str, ...] = CALL_CENTER_PREFIXES

    def __call__(self, creator: str | None) -> bool:
        if not creator:
            return False
        name = str(creator).lower()
        return any(m in name for m in self.markers) or name.startswith(self.prefixes)


DEFAULT_CALL_CENTER = CallCenterMatcher()


def filter_rows(
    rows: Iterable[Row],
    criteria: FilterCriteria,
    is_call_center: CallCenterMatcher | None = None,
) -> list[Row]:
    """Order-preserving subsequence of ``rows`` matching every active predicate.

    The inclusion set on ``criteria`` is not applied here; the aggregator
    gates on it.
    """
    matcher = is_call_center or DEFAULT_CALL_CENTER
    return [row for row in rows if _row_matches(row, criteria, matcher)]


def _row_matches(row: Row, criteria: FilterCriteria, matcher) -> bool:
    if criteria.source is not None:
        if resolve_label(row, LogicalField.SOURCE) != criteria.source:
            return False

    if criteria.creator is not None:
        if resolve_label(row, LogicalField.CREATOR) != criteria.creator:
            return False

    if criteria.has_date_range:
        day = normalize_date(resolve_field(row, LogicalField.DATE))
        if day is None:
            return False
        if criteria.start_date is not None and day < criteria.start_date:
            return False
        if criteria.end_date is not None and day > criteria.end_date:
            return False

    if criteria.call_center_only:
        if not matcher(resolve_label(row, LogicalField.CREATOR)):
            return False

    return True
