"""
Cell-level helpers used by ExcelWriter.

A cell has a *kind*: "text", "count" or "share". Kinds decide alignment and
number format; the role (body, total, header) decides font, fill and border.
"""
from __future__ import annotations

from openpyxl.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from appointments.excel.styles import (
    BODY_BORDER, BODY_FONT, CENTER, HEADER_BORDER, HEADER_FILL, HEADER_FONT,
    KPI_LABEL_FONT, KPI_VALUE_FONT, LEFT, NUMBER_FORMATS, RIGHT,
    STRIPE_FILL, TOP_RANK_FILL, TOTAL_BORDER, TOTAL_FILL, TOTAL_FONT,
)


def style_header(ws: Worksheet, row: int, labels: list[str]) -> None:
    for col, label in enumerate(labels, 1):
        cell = ws.cell(row=row, column=col, value=label)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = HEADER_BORDER
        cell.alignment = CENTER


def write_cell(
    ws: Worksheet,
    row: int,
    col: int,
    value,
    kind: str = "text",
    total: bool = False,
    top_rank: bool = False,
) -> Cell:
    """Write one body or total cell with the style for its kind."""
    cell = ws.cell(row=row, column=col, value=value)
    cell.font = TOTAL_FONT if total else BODY_FONT
    cell.border = TOTAL_BORDER if total else BODY_BORDER

    fmt = NUMBER_FORMATS.get(kind)
    cell.alignment = RIGHT if fmt else LEFT
    if fmt:
        cell.number_format = fmt

    if total:
        cell.fill = TOTAL_FILL
    elif top_rank:
        cell.fill = TOP_RANK_FILL
    elif row % 2 == 0:
        cell.fill = STRIPE_FILL
    return cell


def fit_columns(ws: Worksheet, min_width: int = 10, max_width: int = 60) -> None:
    """Size each column to its longest value (Greek store names run long)."""
    for column in ws.columns:
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        letter = get_column_letter(column[0].column)
        ws.column_dimensions[letter].width = min(max(longest + 2, min_width), max_width)


def kpi_card(ws: Worksheet, row: int, col: int, value, label: str) -> None:
    """Big centred number with a small caption underneath."""
    top = ws.cell(row=row, column=col, value=value)
    top.font = KPI_VALUE_FONT
    top.alignment = CENTER
    if isinstance(value, (int, float)):
        top.number_format = NUMBER_FORMATS["count"]

    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font = KPI_LABEL_FONT
    caption.alignment = CENTER
