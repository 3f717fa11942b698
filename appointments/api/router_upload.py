"""
Upload endpoints: replace the loaded data set with a file or the sample data.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File

from appointments.data.fields import missing_fields
from appointments.data.loader import IngestionError
from appointments.data.store import DataStore
from appointments.api.dependencies import get_store_or_empty
from appointments.api.response_models import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


def _loaded(store: DataStore) -> UploadResponse:
    return UploadResponse(
        status="loaded",
        file=store.filename,
        rows=store.row_count(),
        missing_fields=missing_fields(store.columns()),
    )


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    file: UploadFile = File(...),
    store: DataStore = Depends(get_store_or_empty),
):
    """Upload a CSV or Excel export; it replaces the current data set."""
    if not file.filename:
        raise HTTPException(400, "Missing filename")

    content = await file.read()
    try:
        store.load_bytes(file.filename, content)
    except IngestionError as exc:
        logger.warning("Upload rejected: %s", exc)
        raise HTTPException(400, str(exc))

    return _loaded(store)


@router.post("/sample", response_model=UploadResponse)
def load_sample(store: DataStore = Depends(get_store_or_empty)):
    """Load the built-in sample data set."""
    store.load_sample()
    return _loaded(store)
