"""
Dashboard endpoints — the four appointment series under the current filters.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from appointments.analytics.aggregate import DIMENSIONS, build_dashboard
from appointments.analytics.common import merge_long_tail
from appointments.data.schemas import FilterCriteria
from appointments.data.store import DataStore
from appointments.api.dependencies import get_store, parse_criteria
from appointments.api.response_models import DashboardResponse, SeriesResponse

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/appointments", response_model=DashboardResponse)
def appointments(
    store: DataStore = Depends(get_store),
    criteria: FilterCriteria = Depends(parse_criteria),
):
    """Counts by user, source, day and store."""
    return build_dashboard(store.rows, criteria)


@router.get("/appointments/{dimension}", response_model=SeriesResponse)
def appointments_by(
    dimension: str,
    grouped: bool = Query(False, description="Merge small slices into 'Other' (not for dates)"),
    store: DataStore = Depends(get_store),
    criteria: FilterCriteria = Depends(parse_criteria),
):
    """A single series; ``dimension`` is creator, source, date or location."""
    key = DIMENSIONS.get(dimension)
    if key is None:
        raise HTTPException(404, f"Unknown dimension: {dimension}. Valid: {list(DIMENSIONS)}")
    if grouped and dimension == "date":
        raise HTTPException(400, "The date series cannot be grouped")

    series = build_dashboard(store.rows, criteria)[key]
    if grouped:
        series = merge_long_tail(series)
    return SeriesResponse(dimension=dimension, grouped=grouped, series=series)
