#!/usr/bin/env python3
"""
Appointment Analytics CLI — reports from an export file, Excel output, API server.

USAGE:
  python -m appointments.cli report "Ραντεβού.xlsx"                      # Four tables
  python -m appointments.cli report export.csv --source SP4 --call-center
  python -m appointments.cli report export.csv --start 01/08/2025 --end 31/08/2025
  python -m appointments.cli report export.csv --include k_tsipasis --include s_kouvari
  python -m appointments.cli report --sample --json                       # Built-in sample data

  python -m appointments.cli excel export.csv                            # Styled workbook
  python -m appointments.cli excel export.csv -o report.xlsx

  python -m appointments.cli serve                                       # Start API server
  python -m appointments.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import datetime

from appointments.config import REPORTS_FOLDER
from appointments.analytics.aggregate import build_dashboard
from appointments.analytics.common import with_shares
from appointments.data.dates import parse_date_text
from appointments.data.loader import IngestionError
from appointments.data.schemas import FilterCriteria
from appointments.data.store import DataStore


def _date_arg(value: str):
    try:
        return parse_date_text(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def _build_criteria(args) -> FilterCriteria:
    """Build FilterCriteria from CLI args."""
    return FilterCriteria.from_params(
        source=args.source,
        creator=args.creator,
        included_creators=args.include,
        start_date=args.start,
        end_date=args.end,
        call_center_only=args.call_center,
    )


def _load_store(args) -> DataStore:
    store = DataStore()
    if args.sample:
        return store.load_sample()
    if not args.file:
        print("  Specify an export file or --sample")
        sys.exit(2)
    try:
        return store.load(args.file)
    except IngestionError as exc:
        print(f"  Error: {exc}")
        sys.exit(1)


def _print_series(title: str, series: list[dict], key: str) -> None:
    print(f"\n{title} ({len(series)}):\n")
    if not series:
        print("    (none)")
        return
    rows = with_shares(series) if key == "label" else series
    for i, item in enumerate(rows, 1):
        share = f"{item['share']:>6.1f}%" if "share" in item else ""
        print(f"{i:<4}{str(item[key])[:44]:<46}{item['count']:>6,}  {share}")


def cmd_report(args):
    """Print the four appointment tables."""
    store = _load_store(args)
    data = build_dashboard(store.rows, _build_criteria(args))

    if args.json:
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    s = data["summary"]
    print("\n" + "=" * 70)
    print("  APPOINTMENT ANALYTICS")
    print("=" * 70)
    print(f"  File:    {store.filename}")
    print(f"  Filters: {data['filters']}")
    print(f"  Rows:    {s['total_rows']:,} loaded, {s['matched_rows']:,} matched, {s['counted_rows']:,} counted")
    if s["first_date"]:
        print(f"  Period:  {s['first_date']} to {s['last_date']}")
    if s["undated_rows"]:
        print(f"  Undated: {s['undated_rows']:,}")

    if not s["counted_rows"]:
        print("\n  No data available for the selected filter.\n")
        return

    _print_series("APPOINTMENTS BY USER", data["by_creator"], "label")
    _print_series("APPOINTMENTS BY SOURCE", data["by_source"], "label")
    _print_series("APPOINTMENTS BY STORE", data["by_location"], "label")
    _print_series("APPOINTMENTS OVER TIME", data["by_date"], "date")
    print()


def cmd_excel(args):
    """Write the styled Excel report."""
    from appointments.reports.appointment_report import generate_excel

    store = _load_store(args)
    if args.output:
        out = args.output
    else:
        out = REPORTS_FOLDER / f"Appointment_Report_{datetime.now():%Y%m%d_%H%M%S}.xlsx"
    path = generate_excel(store, out, _build_criteria(args))
    print(f"\n  Report saved to: {path}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Appointment Analytics API on {args.host}:{args.port}...")
    uvicorn.run("appointments.main:app", host=args.host, port=args.port, reload=args.reload)


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", nargs="?", help="CSV or Excel export")
    p.add_argument("--sample", action="store_true", help="Use the built-in sample data")
    p.add_argument("--source", help="Only this source type")
    p.add_argument("--creator", help="Only this user")
    p.add_argument("--include", action="append", help="Include only these users (repeatable)")
    p.add_argument("--start", type=_date_arg, help="Start date (DD/MM/YYYY or YYYY-MM-DD)")
    p.add_argument("--end", type=_date_arg, help="End date (DD/MM/YYYY or YYYY-MM-DD)")
    p.add_argument("--call-center", action="store_true", help="Only call-center users")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Appointment Analytics — appointment counts from CSV/Excel exports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    report_parser = subparsers.add_parser("report", help="Print appointment tables")
    _add_input_args(report_parser)
    report_parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    report_parser.set_defaults(func=cmd_report)

    excel_parser = subparsers.add_parser("excel", help="Generate Excel report")
    _add_input_args(excel_parser)
    excel_parser.add_argument("-o", "--output", help="Output .xlsx path")
    excel_parser.set_defaults(func=cmd_excel)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    logging.basicConfig(level=logging.INFO, format="  %(levelname)s %(name)s: %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
