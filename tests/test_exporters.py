from __future__ import annotations

import csv
import io

import pytest
from openpyxl import load_workbook

from core.models import GroupByDimension
from core.reporting.api import generate_csv_report, generate_excel_report, write_csv_template
from core.reporting.contexts import EXPORT_HEADERS
from core.reporting.csv_export import entries_to_csv
from core.reporting.renderers.excel import GROUP_PREFIX, TOTAL_LABEL
from core.services.importing import parse_csv, validate_headers
from core.services.importing.csv_parser import BOM


@pytest.fixture
def report(services, workspace_id):
    ps = services["project_service"]
    cs = services["client_service"]
    tes = services["time_entry_service"]

    acme = cs.create_client(workspace_id, "Acme")
    web = ps.create_project(workspace_id, "Website", client_id=acme.id, billable_by_default=True)
    tes.create_entry('Review, "final"', "2026-02-09", "09:00", "10:30", project_id=web.id)
    tes.create_entry("Email", "2026-02-10", "08:00", "08:20")

    reporting = services["reporting_service"]
    entries = reporting.report_entries()
    return reporting, entries, reporting.export_lookups(workspace_id)


def test_csv_export_quotes_and_formats(report):
    _, entries, lookups = report
    rows = list(csv.DictReader(io.StringIO(entries_to_csv(entries, lookups))))

    assert list(rows[0].keys()) == EXPORT_HEADERS
    assert [row["Description"] for row in rows] == ["Email", 'Review, "final"']
    review = rows[1]
    assert review["Project"] == "Website"
    assert review["Client"] == "Acme"
    assert review["Duration"] == "1:30"
    assert review["Billable"] == "Yes"
    assert review["User"] == "Administrator"
    assert (rows[0]["Project"], rows[0]["Billable"]) == ("No project", "No")


def test_csv_report_file_has_bom(report, tmp_path):
    _, entries, lookups = report
    path = generate_csv_report(entries, lookups, tmp_path / "out" / "report.csv")

    raw = path.read_bytes()
    assert raw.startswith(BOM.encode("utf-8"))
    assert path.read_text(encoding="utf-8-sig").splitlines()[0] == ",".join(EXPORT_HEADERS)


def test_template_file_passes_header_validation(tmp_path):
    path = write_csv_template(tmp_path / "template.csv")
    parsed = parse_csv(path.read_text(encoding="utf-8"))

    assert validate_headers(parsed.headers) == []
    assert len(parsed.rows) == 1


def test_flat_excel_report(report, tmp_path):
    reporting, entries, lookups = report
    path = generate_excel_report(reporting, entries, lookups, tmp_path / "report.xlsx")

    ws = load_workbook(path).active
    assert [cell.value for cell in ws[1]] == EXPORT_HEADERS
    assert ws.max_row == 3
    assert ws.cell(3, EXPORT_HEADERS.index("Description") + 1).value == 'Review, "final"'
    assert ws.cell(3, EXPORT_HEADERS.index("Duration") + 1).value == "1:30"
    assert ws.freeze_panes == "A2"


def test_grouped_excel_report(report, tmp_path):
    reporting, entries, lookups = report
    path = generate_excel_report(
        reporting,
        entries,
        lookups,
        tmp_path / "grouped.xlsx",
        group_by=GroupByDimension.PROJECT,
        sort_by="duration",
        order="desc",
    )

    ws = load_workbook(path).active
    first_column = [ws.cell(row, 1).value for row in range(2, ws.max_row + 1)]
    duration_col = EXPORT_HEADERS.index("Duration") + 1

    assert first_column[0] == f"{GROUP_PREFIX} Project: Website"
    assert first_column[2] == f"{GROUP_PREFIX} Project: No project"
    assert first_column[-1] == TOTAL_LABEL
    assert ws.cell(ws.max_row, duration_col).value == "1:50"
    assert ws.row_dimensions[3].outline_level == 1
    assert ws.row_dimensions[2].outline_level in (0, None)
