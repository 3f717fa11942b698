"""Data loading, field resolution, date normalisation and filtering."""
from .schemas import FilterCriteria, LogicalField, Row
from .dates import normalize_date, format_date, parse_date_text
from .fields import resolve_field, resolve_label, distinct_values
from .filters import filter_rows, CallCenterMatcher
from .loader import load_rows, load_rows_from_bytes, IngestionError
from .store import DataStore
