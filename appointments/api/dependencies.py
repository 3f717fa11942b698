"""
FastAPI dependencies — DataStore singleton, filter parsing.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from fastapi import HTTPException, Query

from appointments.data.dates import parse_date_text
from appointments.data.schemas import FilterCriteria
from appointments.data.store import DataStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "No appointment data loaded yet")
    return _store


def get_store_or_empty() -> DataStore:
    """Return the store even if it has no data (for upload/health endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Filter parsing from query params
# ---------------------------------------------------------------------------

def _parse_bound(value: str | None, name: str) -> dt.date | None:
    if not value:
        return None
    try:
        return parse_date_text(value)
    except ValueError as exc:
        raise HTTPException(400, f"Invalid {name}: {exc}")


def parse_criteria(
    source: Optional[str] = Query(None, description="Exact source type"),
    creator: Optional[str] = Query(None, description="Exact creating user"),
    include: Optional[list[str]] = Query(None, description="Users to include (repeatable); empty = all"),
    start_date: Optional[str] = Query(None, description="DD/MM/YYYY or YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, description="DD/MM/YYYY or YYYY-MM-DD"),
    call_center_only: bool = Query(False),
) -> FilterCriteria:
    """Parse filter query parameters into FilterCriteria."""
    start = _parse_bound(start_date, "start_date")
    end = _parse_bound(end_date, "end_date")
    if start and end and start > end:
        raise HTTPException(400, "start_date is after end_date")

    return FilterCriteria.from_params(
        source=source,
        creator=creator,
        included_creators=include,
        start_date=start,
        end_date=end,
        call_center_only=call_center_only,
    )
