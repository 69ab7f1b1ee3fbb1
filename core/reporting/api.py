"""Reporting API wrappers around renderer classes."""

from pathlib import Path
from typing import List

from core.models import GroupByDimension, TimeEntry
from core.reporting.contexts import ExcelReportContext, ExportLookups
from core.reporting.csv_export import entries_to_csv, write_csv
from core.reporting.renderers.excel import ExcelReportRenderer
from core.services.importing.template import generate_csv_template
from core.services.reporting import ReportingService


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def generate_excel_report(
    reporting_service: ReportingService,
    entries: List[TimeEntry],
    lookups: ExportLookups,
    output_path: str | Path,
    group_by: GroupByDimension | str = GroupByDimension.NONE,
    sort_by: str = "name",
    order: str = "asc",
) -> Path:
    grouping = None
    if GroupByDimension(group_by) != GroupByDimension.NONE:
        grouping = reporting_service.group_entries(entries, group_by, sort_by=sort_by, order=order)
    ctx = ExcelReportContext(entries=list(entries), lookups=lookups, grouping=grouping)
    return ExcelReportRenderer().render(ctx, _ensure_parent(Path(output_path)))


def generate_csv_report(
    entries: List[TimeEntry],
    lookups: ExportLookups,
    output_path: str | Path,
) -> Path:
    return write_csv(entries_to_csv(entries, lookups), _ensure_parent(Path(output_path)))


def write_csv_template(output_path: str | Path) -> Path:
    return write_csv(generate_csv_template(), _ensure_parent(Path(output_path)))
