# main.py
"""Command-line entry point for the time tracker.

Examples:
    python main.py template time-import-template.csv
    python main.py --user anna@example.com import week.csv
    python main.py export report.xlsx --from 2026-02-01 --to 2026-02-28 --group-by project
    python main.py timesheet --week 2026-02-09
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path

from core.exceptions import DomainError
from core.models import BillableFilter, GroupByDimension
from core.reporting.api import generate_csv_report, generate_excel_report, write_csv_template
from core.services.common.durations import format_duration
from core.services.importing import TEMPLATE_FILENAME
from core.services.reporting import ReportFilter
from infra.db.base import SessionLocal, resolve_db_url
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.services import ServiceGraph, build_service_graph

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_REJECTED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time tracking: CSV import, reports and timesheets")
    parser.add_argument(
        "--user",
        default=os.getenv("TT_ADMIN_EMAIL", "admin@example.com"),
        help="E-mail of the member to act as (default: bootstrap admin)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    template = sub.add_parser("template", help="Write an example CSV import file")
    template.add_argument("output", nargs="?", default=TEMPLATE_FILENAME)

    importer = sub.add_parser("import", help="Validate and import time entries from CSV")
    importer.add_argument("file", type=Path)
    importer.add_argument("--dry-run", action="store_true", help="Validate only, write nothing")

    export = sub.add_parser("export", help="Export visible entries to .csv or .xlsx")
    export.add_argument("output", type=Path)
    export.add_argument("--from", dest="start_date")
    export.add_argument("--to", dest="end_date")
    export.add_argument("--project", dest="project_id")
    export.add_argument("--member", dest="member_id")
    export.add_argument("--team", dest="team_id")
    export.add_argument("--tag", dest="tag_id")
    export.add_argument(
        "--billable",
        choices=[f.value for f in BillableFilter],
        default=BillableFilter.ALL.value,
    )
    export.add_argument(
        "--group-by",
        choices=[d.value for d in GroupByDimension],
        default=GroupByDimension.NONE.value,
        help="Excel only",
    )
    export.add_argument("--sort-by", choices=["name", "duration"], default="name")
    export.add_argument("--order", choices=["asc", "desc"], default="asc")

    timesheet = sub.add_parser("timesheet", help="Print the weekly per-project timesheet")
    timesheet.add_argument("--week", type=date.fromisoformat, default=None, help="Any day of the week")
    return parser


def _cmd_template(graph: ServiceGraph, args) -> int:
    path = write_csv_template(args.output)
    print(f"Template written to {path}")
    return EXIT_OK


def _cmd_import(graph: ServiceGraph, args) -> int:
    text = args.file.read_text(encoding="utf-8")
    service = graph.import_service
    preview = service.preview(text)
    summary = preview.result.summary
    for bucket in summary.by_project:
        print(f"  {bucket.name:<30} {bucket.count:>4}  {format_duration(bucket.minutes):>7}")
    print(f"Rows: {summary.total_entries}  Total: {format_duration(summary.total_minutes)}")

    if not preview.valid:
        for error in preview.result.errors:
            print(f"Row {error.row} [{error.field}]: {error.message}", file=sys.stderr)
        logger.warning("Import of %s rejected with %d error(s)", args.file, len(preview.result.errors))
        return EXIT_REJECTED
    if args.dry_run:
        print("Dry run: nothing was saved.")
        return EXIT_OK

    created = service.commit(preview.result)
    print(f"Imported {len(created)} entries.")
    return EXIT_OK


def _cmd_export(graph: ServiceGraph, args) -> int:
    reporting = graph.reporting_service
    report_filter = ReportFilter(
        start_date=args.start_date,
        end_date=args.end_date,
        project_id=args.project_id,
        member_id=args.member_id,
        team_id=args.team_id,
        tag_id=args.tag_id,
        billable=BillableFilter(args.billable),
    )
    entries = reporting.report_entries(report_filter)
    lookups = reporting.export_lookups(graph.user_session.principal.workspace_id)

    if args.output.suffix.lower() == ".xlsx":
        path = generate_excel_report(
            reporting,
            entries,
            lookups,
            args.output,
            group_by=args.group_by,
            sort_by=args.sort_by,
            order=args.order,
        )
    else:
        path = generate_csv_report(entries, lookups, args.output)

    totals = reporting.summarize(entries)
    print(
        f"{totals.entry_count} entries, {format_duration(totals.total_minutes)} "
        f"({format_duration(totals.billable_minutes)} billable) -> {path}"
    )
    return EXIT_OK


def _cmd_timesheet(graph: ServiceGraph, args) -> int:
    principal = graph.user_session.principal
    workspace = graph.member_service.get_workspace(principal.workspace_id)
    week_starts_on = workspace.week_starts_on if workspace else 0
    any_day = args.week or date.today()

    own = [e for e in graph.time_entry_service.list_entries() if e.user_id == principal.user_id]
    sheet = graph.reporting_service.weekly_timesheet(own, any_day, week_starts_on)

    header = "".join(f"{day.strftime('%a %d'):>9}" for day in sheet.days)
    print(f"{'Project':<24}{header}{'Total':>9}")
    for row in sheet.rows:
        cells = "".join(f"{format_duration(m) if m else '-':>9}" for m in row.daily_minutes)
        print(f"{row.project_name[:23]:<24}{cells}{format_duration(row.total_minutes):>9}")
    totals = "".join(f"{format_duration(m):>9}" for m in sheet.daily_totals)
    print(f"{'Total':<24}{totals}{format_duration(sheet.total_minutes):>9}")
    return EXIT_OK


_COMMANDS = {
    "template": _cmd_template,
    "import": _cmd_import,
    "export": _cmd_export,
    "timesheet": _cmd_timesheet,
}


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging()
    run_migrations(resolve_db_url())

    session = SessionLocal()
    try:
        graph = build_service_graph(session)
        graph.auth_service.sign_in(args.user)
        return _COMMANDS[args.command](graph, args)
    except OSError as exc:
        logger.error("File error: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR
    except DomainError as exc:
        logger.error("%s (%s)", exc, exc.code)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_REJECTED
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
