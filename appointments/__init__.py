# ==============================================
# Appointment Analytics
# ==============================================
#
# appointments/
# ├── data/        # ingestion, field resolution, dates, filters, store
# ├── analytics/   # aggregation engine + display helpers
# ├── excel/       # openpyxl styling and workbook writer
# ├── reports/     # JSON / Excel report generators
# ├── api/         # FastAPI routers
# ├── config.py    # paths, column candidates, heuristics
# ├── main.py      # FastAPI app factory
# └── cli.py       # command line entry point
#
# ==============================================

__version__ = "1.0.0"
