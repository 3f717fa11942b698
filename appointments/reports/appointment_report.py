"""
Appointment Report — summary KPIs plus one sheet per dimension.
"""
from __future__ import annotations

from pathlib import Path

from appointments.analytics.aggregate import build_dashboard
from appointments.analytics.common import with_shares
from appointments.data.schemas import FilterCriteria
from appointments.data.store import DataStore
from appointments.excel.writer import Column, ExcelWriter

REPORT_TITLE = "APPOINTMENT ANALYTICS"

_LABEL_SHEETS = [
    # (result key, sheet title, label header)
    ("by_creator", "By User", "User"),
    ("by_source", "By Source", "Source"),
    ("by_location", "By Store", "Store"),
]


def generate_json(store: DataStore, criteria: FilterCriteria | None = None) -> dict:
    data = build_dashboard(store.rows, criteria)
    data["file"] = store.filename
    return data


def build_workbook(data: dict) -> ExcelWriter:
    ew = ExcelWriter()
    summary = data["summary"]

    ws = ew.add_sheet("Summary")
    row = ew.write_title(ws, REPORT_TITLE, f"{data.get('file') or 'Uploaded data'}  |  {data['filters']}")
    row = ew.write_section(ws, row, "OVERVIEW")
    row = ew.write_kpi_row(ws, row, [
        (summary["counted_rows"], "Appointments"),
        (len(data["by_creator"]), "Users"),
        (len(data["by_location"]), "Stores"),
    ])
    if summary["first_date"]:
        row = ew.write_note(ws, row, f"Period: {summary['first_date']} to {summary['last_date']}")
    if summary["undated_rows"]:
        ew.write_note(ws, row, f"{summary['undated_rows']} appointments without a readable date")

    for key, title, header in _LABEL_SHEETS:
        ew.write_table(ew.add_sheet(title), 1, [
            Column("label", header),
            Column("count", "Appointments", "count"),
            Column("share", "Share", "share"),
        ], with_shares(data[key]), top_ranks=3, total_label="TOTAL")

    ew.write_table(ew.add_sheet("Over Time"), 1, [
        Column("date", "Date"),
        Column("count", "Appointments", "count"),
    ], data["by_date"], total_label="TOTAL")

    return ew


def generate_excel(
    store: DataStore,
    output_path: str | Path,
    criteria: FilterCriteria | None = None,
) -> Path:
    return build_workbook(generate_json(store, criteria)).save(output_path)


def excel_bytes(store: DataStore, criteria: FilterCriteria | None = None) -> bytes:
    return build_workbook(generate_json(store, criteria)).to_bytes()
