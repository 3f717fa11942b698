"""
Report download endpoints.
"""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from appointments.data.schemas import FilterCriteria
from appointments.data.store import DataStore
from appointments.api.dependencies import get_store, parse_criteria
from appointments.reports.appointment_report import excel_bytes

router = APIRouter(prefix="/api", tags=["reports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/appointments/export")
def export_excel(
    store: DataStore = Depends(get_store),
    criteria: FilterCriteria = Depends(parse_criteria),
):
    """Styled Excel workbook of the dashboard under the given filters."""
    filename = f"Appointment_Report_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    return Response(
        content=excel_bytes(store, criteria),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
