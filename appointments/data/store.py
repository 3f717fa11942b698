"""
DataStore — the currently loaded appointment export, held in memory.

Loaded on upload, queried on every request. A new load replaces the row
set wholesale; nothing is merged.
"""
from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Optional

from appointments.data.dates import normalize_date
from appointments.data.fields import distinct_values, resolve_columns, resolve_field
from appointments.data.loader import load_rows, load_rows_from_bytes
from appointments.data.sample import SAMPLE_FILENAME, sample_rows
from appointments.data.schemas import LogicalField, Row

logger = logging.getLogger(__name__)


class DataStore:
    """In-memory appointment rows with metadata accessors."""

    def __init__(self) -> None:
        self.rows: tuple[Row, ...] = ()
        self.filename: Optional[str] = None
        self.loaded_at: Optional[dt.datetime] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, filepath: str | Path) -> "DataStore":
        """Load a CSV/Excel export from disk."""
        filepath = Path(filepath)
        return self._replace(load_rows(filepath), filepath.name)

    def load_bytes(self, filename: str, content: bytes) -> "DataStore":
        """Load uploaded file content."""
        return self._replace(load_rows_from_bytes(filename, content), filename)

    def load_sample(self) -> "DataStore":
        return self._replace(sample_rows(), SAMPLE_FILENAME)

    def _replace(self, rows: list[Row], filename: str) -> "DataStore":
        # Single assignment so readers never see a half-swapped data set
        self.rows = tuple(rows)
        self.filename = filename
        self.loaded_at = dt.datetime.now()
        logger.info("Loaded %s: %d rows", filename, len(self.rows))
        return self

    @property
    def is_loaded(self) -> bool:
        return self.filename is not None

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.rows)

    def columns(self) -> list[str]:
        """Union of headers across rows, in first-seen order."""
        seen: dict[str, None] = {}
        for row in self.rows:
            for key in row:
                seen.setdefault(key, None)
        return list(seen)

    def field_mapping(self) -> dict[str, str | None]:
        return resolve_columns(self.columns())

    def sources(self) -> list[str]:
        return distinct_values(self.rows, LogicalField.SOURCE)

    def creators(self) -> list[str]:
        return distinct_values(self.rows, LogicalField.CREATOR)

    def locations(self) -> list[str]:
        return distinct_values(self.rows, LogicalField.LOCATION)

    def date_bounds(self) -> tuple[dt.date | None, dt.date | None]:
        """Earliest and latest parseable appointment date."""
        dates = [
            d for d in (normalize_date(resolve_field(r, LogicalField.DATE)) for r in self.rows)
            if d is not None
        ]
        if not dates:
            return None, None
        return min(dates), max(dates)
