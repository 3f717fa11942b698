"""
Ingestion adapters — CSV / Excel exports to a list of rows.
"""
from __future__ import annotations

import csv
import datetime as dt
import io
import logging
from pathlib import Path

import pandas as pd

from appointments.config import (
    ACCEPTED_EXTENSIONS,
    CSV_DELIMITERS,
    CSV_ENCODINGS,
    CSV_EXTENSIONS,
    CSV_SNIFF_LINES,
    EXCEL_EXTENSIONS,
)
from appointments.data.fields import missing_fields
from appointments.data.schemas import Row

logger = logging.getLogger(__name__)


class IngestionError(ValueError):
    """The uploaded file cannot be turned into appointment rows."""


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def load_rows(filepath: str | Path) -> list[Row]:
    """Load a CSV or Excel file from disk."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise IngestionError(f"File not found: {filepath}")
    return load_rows_from_bytes(filepath.name, filepath.read_bytes())


def load_rows_from_bytes(filename: str, content: bytes) -> list[Row]:
    """Parse uploaded file content, dispatching on the filename extension."""
    ext = Path(filename or "").suffix.lower()
    if ext not in ACCEPTED_EXTENSIONS:
        accepted = ", ".join(sorted(ACCEPTED_EXTENSIONS))
        raise IngestionError(f"Unsupported file type '{ext or filename}' (accepted: {accepted})")
    if not content:
        raise IngestionError(f"'{filename}' is empty")

    if ext in CSV_EXTENSIONS:
        df = _read_csv(content, filename)
    else:
        df = _read_excel(content, filename)

    rows = frame_to_rows(df)
    absent = missing_fields(df.columns)
    if absent:
        logger.warning("%s: no column found for %s (columns: %s)", filename, ", ".join(absent), list(df.columns))
    logger.info("%s: %d rows, %d columns", filename, len(rows), len(df.columns))
    return rows


def frame_to_rows(df: pd.DataFrame) -> list[Row]:
    """DataFrame -> list of {header: native scalar}, skipping blank rows."""
    columns = [str(c) for c in df.columns]
    rows: list[Row] = []
    for values in df.itertuples(index=False, name=None):
        row = {col: _clean_cell(v) for col, v in zip(columns, values)}
        if any(not _is_blank(v) for v in row.values()):
            rows.append(row)
    return rows


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------

def _read_csv(content: bytes, filename: str) -> pd.DataFrame:
    text = _decode(content, filename)
    sep = _sniff_delimiter(text)
    logger.debug("%s: delimiter %r", filename, sep)
    try:
        return pd.read_csv(
            io.StringIO(text),
            sep=sep,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, csv.Error) as exc:
        raise IngestionError(f"Could not parse '{filename}' as CSV: {exc}") from exc


def _decode(content: bytes, filename: str) -> str:
    for encoding in CSV_ENCODINGS:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("%s: not %s, trying next encoding", filename, encoding)
    raise IngestionError(f"Could not decode '{filename}' with any of {CSV_ENCODINGS}")


def _sniff_delimiter(text: str) -> str:
    # Spaces are never delimiters: headers like "Source Type" contain them
    sample = "\n".join(text.splitlines()[:CSV_SNIFF_LINES])
    try:
        return csv.Sniffer().sniff(sample, delimiters=CSV_DELIMITERS).delimiter
    except csv.Error:
        return ","  # single column, or nothing to tell delimiters apart


def _read_excel(content: bytes, filename: str) -> pd.DataFrame:
    # First sheet only; multi-sheet workbooks are not merged
    try:
        return pd.read_excel(io.BytesIO(content), sheet_name=0, engine="openpyxl")
    except Exception as exc:
        raise IngestionError(f"Could not read '{filename}' as an Excel workbook: {exc}") from exc


# ---------------------------------------------------------------------------
# Cell cleaning
# ---------------------------------------------------------------------------

def _clean_cell(value):
    if value is None or isinstance(value, str):
        return value
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None  # NaN, NaT
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, (dt.date, bool)):
        return value
    if hasattr(value, "item"):
        value = value.item()  # numpy scalar -> Python
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
