"""
Appointment Analytics — Configuration: paths, constants, column candidates.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with APPOINTMENTS_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("APPOINTMENTS_DATA_DIR", str(Path.home() / "Appointment Analytics")))
BASE_FOLDER = _data_dir
REPORTS_FOLDER = _data_dir / "reports"

# Export loaded by the API at startup; sample data is served when unset
_data_file = os.environ.get("APPOINTMENTS_DATA_FILE")
DEFAULT_DATA_FILE = Path(_data_file) if _data_file else None

# ---------------------------------------------------------------------------
# Ingestion
# ---------------------------------------------------------------------------
CSV_EXTENSIONS = {".csv", ".txt"}
EXCEL_EXTENSIONS = {".xlsx", ".xlsm"}
ACCEPTED_EXTENSIONS = CSV_EXTENSIONS | EXCEL_EXTENSIONS

# Tried in order; exports from Greek-locale Excel are often cp1253
CSV_ENCODINGS = ["utf-8-sig", "cp1253", "latin-1"]

# Delimiters the sniffer may choose from, and how many lines it looks at
CSV_DELIMITERS = ",;\t|"
CSV_SNIFF_LINES = 20

# ---------------------------------------------------------------------------
# Column candidates per logical field (order matters — first match wins).
# Matching ignores whitespace and case, and accepts containment either way.
# ---------------------------------------------------------------------------
CREATOR_CANDIDATES = (
    "Χρήστης δημιουργίας",
    "Χρήστης_δημιουργίας",
    "User",
    "Χρήστης",
    "created by",
    "creator",
)

SOURCE_CANDIDATES = (
    "Source Type",
    "Source_Type",
    "SourceType",
    "Source",
    "Type",
    "Πηγή",
)

LOCATION_CANDIDATES = (
    "Υποκατάστημα",
    "Store",
    "Branch",
    "Κατάστημα",
    "Shop",
    "Location",
)

DATE_CANDIDATES = (
    "Ημερομηνία δημιουργίας",
    "Ημερομηνία_δημιουργίας",
    "Date",
    "Ημ/νία δημιουργίας",
    "Ημερομηνία",
    "Ημέρα",
    "Ημερομηνία/Ώρα Έναρξης",
    "Start Date",
    "Start Time",
)

# ---------------------------------------------------------------------------
# Date parsing bounds for day/month/year strings
# ---------------------------------------------------------------------------
MIN_YEAR = 1900
MAX_YEAR = 2100
DATE_DELIMITERS = ("/", "-", ".")

# ---------------------------------------------------------------------------
# Call-center heuristic — naming convention of the exporting organisation.
# Comma-separated overrides via env vars.
# ---------------------------------------------------------------------------
_DEFAULT_CC_MARKERS = "call_center,callcenter,call center,cc_,κέντρο,kentro"
_DEFAULT_CC_PREFIXES = "cc"


def _csv_env(name: str, default: str) -> tuple[str, ...]:
    raw = os.environ.get(name, default)
    return tuple(p.strip().lower() for p in raw.split(",") if p.strip())


CALL_CENTER_MARKERS = _csv_env("APPOINTMENTS_CALL_CENTER_MARKERS", _DEFAULT_CC_MARKERS)
CALL_CENTER_PREFIXES = _csv_env("APPOINTMENTS_CALL_CENTER_PREFIXES", _DEFAULT_CC_PREFIXES)

# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------
MAX_PIE_SLICES = 7
OTHER_LABEL = "Other"
