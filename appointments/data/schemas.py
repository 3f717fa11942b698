"""
Row, logical field and filter criteria schemas.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from appointments.config import (
    CREATOR_CANDIDATES,
    SOURCE_CANDIDATES,
    LOCATION_CANDIDATES,
    DATE_CANDIDATES,
)

# One ingested record: header name -> cell value. Never mutated downstream.
Row = Mapping[str, Any]


class LogicalField(str, Enum):
    CREATOR = "creator"
    SOURCE = "source"
    LOCATION = "location"
    DATE = "date"

    @property
    def candidates(self) -> tuple[str, ...]:
        """Column-name candidates in priority order."""
        return _CANDIDATES[self]


_CANDIDATES = {
    LogicalField.CREATOR: CREATOR_CANDIDATES,
    LogicalField.SOURCE: SOURCE_CANDIDATES,
    LogicalField.LOCATION: LOCATION_CANDIDATES,
    LogicalField.DATE: DATE_CANDIDATES,
}


@dataclass(frozen=True)
class FilterCriteria:
    """User-selected predicates for one aggregation request."""
    source: Optional[str] = None
    creator: Optional[str] = None
    included_creators: frozenset[str] = field(default_factory=frozenset)
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    call_center_only: bool = False

    @classmethod
    def from_params(
        cls,
        source: str | None = None,
        creator: str | None = None,
        included_creators: Iterable[str] | None = None,
        start_date: dt.date | None = None,
        end_date: dt.date | None = None,
        call_center_only: bool = False,
    ) -> "FilterCriteria":
        """Build criteria from raw UI/query values, treating blanks as unset."""
        included = frozenset(
            str(c).strip() for c in (included_creators or []) if c is not None and str(c).strip()
        )
        return cls(
            source=_blank_to_none(source),
            creator=_blank_to_none(creator),
            included_creators=included,
            start_date=_as_date(start_date),
            end_date=_as_date(end_date),
            call_center_only=bool(call_center_only),
        )

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    @property
    def label(self) -> str:
        """Human-readable description of the active filters."""
        from appointments.data.dates import format_date

        parts = []
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.creator:
            parts.append(f"User: {self.creator}")
        if self.has_date_range:
            s = format_date(self.start_date) if self.start_date else "…"
            e = format_date(self.end_date) if self.end_date else "…"
            parts.append(f"{s} to {e}")
        if self.call_center_only:
            parts.append("Call center only")
        if self.included_creators:
            parts.append(f"{len(self.included_creators)} users included")
        return "  |  ".join(parts) if parts else "All appointments"


def _as_date(value) -> dt.date | None:
    # datetimes from date pickers compare at day granularity
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
