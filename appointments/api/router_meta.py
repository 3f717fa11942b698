"""
Meta endpoints: health, filter dropdown values, column bindings.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from appointments.data.dates import format_date
from appointments.data.store import DataStore
from appointments.api.dependencies import get_store, get_store_or_empty
from appointments.api.response_models import HealthResponse, ValuesResponse, ColumnsResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    first, last = store.date_bounds()
    return HealthResponse(
        status="ok" if store.is_loaded else "empty",
        rows=store.row_count(),
        file=store.filename,
        loaded_at=store.loaded_at.isoformat(timespec="seconds") if store.loaded_at else None,
        first_date=format_date(first) if first else None,
        last_date=format_date(last) if last else None,
    )


def _values(values: list[str]) -> ValuesResponse:
    return ValuesResponse(values=values, count=len(values))


@router.get("/sources", response_model=ValuesResponse)
def list_sources(store: DataStore = Depends(get_store)):
    return _values(store.sources())


@router.get("/creators", response_model=ValuesResponse)
def list_creators(store: DataStore = Depends(get_store)):
    return _values(store.creators())


@router.get("/locations", response_model=ValuesResponse)
def list_locations(store: DataStore = Depends(get_store)):
    return _values(store.locations())


@router.get("/columns", response_model=ColumnsResponse)
def list_columns(store: DataStore = Depends(get_store)):
    """Raw headers and the column each logical field resolves to."""
    return ColumnsResponse(columns=store.columns(), mapping=store.field_mapping())
