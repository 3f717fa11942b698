"""
ExcelWriter — builds the styled appointment workbook sheet by sheet.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import NamedTuple

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from appointments.excel.styles import NOTE_FONT, SECTION_FONT, SUBTITLE_FONT, TITLE_FONT
from appointments.excel.formatters import fit_columns, kpi_card, style_header, write_cell


class Column(NamedTuple):
    key: str        # dict key in each table row
    label: str      # header text
    kind: str = "text"  # text | count | share


class ExcelWriter:
    """Fluent builder over an openpyxl Workbook."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._sheets = 0

    def add_sheet(self, title: str) -> Worksheet:
        """New worksheet; the workbook's default sheet is reused for the first one."""
        if self._sheets == 0:
            ws = self.wb.active
            ws.title = title
        else:
            ws = self.wb.create_sheet(title=title)
        self._sheets += 1
        return ws

    # ------------------------------------------------------------------
    # Headings and notes
    # ------------------------------------------------------------------

    def write_title(self, ws: Worksheet, title: str, subtitle: str, width: int = 6) -> int:
        """Title and subtitle across ``width`` merged columns. Returns next free row."""
        for row, text, font in ((1, title, TITLE_FONT), (2, subtitle, SUBTITLE_FONT)):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=width)
        for col in range(1, width + 1):
            ws.column_dimensions[get_column_letter(col)].width = 18
        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = SECTION_FONT
        return row + 2

    def write_note(self, ws: Worksheet, row: int, text: str) -> int:
        ws.cell(row=row, column=1, value=text).font = NOTE_FONT
        return row + 1

    def write_kpi_row(self, ws: Worksheet, row: int, kpis: list[tuple], spacing: int = 2) -> int:
        """Row of (value, caption) cards. Returns the row after the captions."""
        for i, (value, caption) in enumerate(kpis):
            kpi_card(ws, row, 1 + i * spacing, value, caption)
        return row + 3

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[Column],
        rows: list[dict],
        top_ranks: int = 0,
        total_label: str | None = None,
    ) -> int:
        """Header, one line per dict in ``rows`` and an optional total line.

        The first ``top_ranks`` lines are highlighted. The total line sums
        every "count" column. Returns the row after the last one written.
        """
        style_header(ws, start_row, [c.label for c in columns])

        row = start_row + 1
        for idx, item in enumerate(rows):
            for col, column in enumerate(columns, 1):
                write_cell(ws, row, col, item.get(column.key), column.kind, top_rank=idx < top_ranks)
            row += 1

        if total_label is not None and rows:
            for col, column in enumerate(columns, 1):
                if col == 1:
                    value = total_label
                elif column.kind == "count":
                    value = sum(item.get(column.key) or 0 for item in rows)
                else:
                    value = None
                write_cell(ws, row, col, value, column.kind, total=True)
            row += 1

        fit_columns(ws)
        ws.freeze_panes = ws.cell(row=start_row + 1, column=1)
        return row

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path

    def to_bytes(self) -> bytes:
        """Workbook as .xlsx bytes, for HTTP downloads."""
        buf = io.BytesIO()
        self.wb.save(buf)
        return buf.getvalue()
