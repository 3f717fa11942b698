"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    rows: int
    file: Optional[str] = None
    loaded_at: Optional[str] = None
    first_date: Optional[str] = None  # DD/MM/YYYY
    last_date: Optional[str] = None


class ValuesResponse(BaseModel):
    values: list[str]
    count: int


class ColumnsResponse(BaseModel):
    columns: list[str]
    mapping: dict[str, Optional[str]]


class UploadResponse(BaseModel):
    status: str
    file: str
    rows: int
    missing_fields: list[str]


class LabelCount(BaseModel):
    label: str
    count: int


class DateCount(BaseModel):
    date: str  # DD/MM/YYYY
    count: int


class DashboardSummary(BaseModel):
    total_rows: int
    matched_rows: int
    counted_rows: int
    undated_rows: int
    first_date: Optional[str] = None
    last_date: Optional[str] = None


class DashboardResponse(BaseModel):
    filters: str
    by_creator: list[LabelCount]
    by_source: list[LabelCount]
    by_date: list[DateCount]
    by_location: list[LabelCount]
    summary: DashboardSummary


class SeriesResponse(BaseModel):
    dimension: str
    grouped: bool
    series: list[dict]
