"""
Appointment Analytics — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from appointments import __version__
from appointments.config import DEFAULT_DATA_FILE
from appointments.data.loader import IngestionError
from appointments.data.store import DataStore
from appointments.api.dependencies import set_store
from appointments.api.router_meta import router as meta_router
from appointments.api.router_upload import router as upload_router
from appointments.api.router_reports import router as reports_router
from appointments.api.router_dashboard import router as dashboard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the configured export at startup, or fall back to the sample data."""
    store = DataStore()
    if DEFAULT_DATA_FILE is not None and DEFAULT_DATA_FILE.exists():
        try:
            store.load(DEFAULT_DATA_FILE)
        except IngestionError as exc:
            logger.error("Could not load %s: %s", DEFAULT_DATA_FILE, exc)
    if not store.is_loaded:
        logger.info("No data file configured — serving sample data")
        store.load_sample()
    set_store(store)

    logger.info("Appointment Analytics ready — %d rows from %s", store.row_count(), store.filename)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Appointment Analytics API",
        description="Appointment counts by user, source, day and store from CSV/Excel exports",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(upload_router)
    # Before the dashboard router so /appointments/export isn't taken as a dimension
    app.include_router(reports_router)
    app.include_router(dashboard_router)

    return app


app = create_app()
