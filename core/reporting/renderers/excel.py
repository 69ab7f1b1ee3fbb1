from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from core.models import GroupByDimension
from core.reporting.contexts import EXPORT_HEADERS, ExcelReportContext
from core.services.common.durations import format_duration

TOTAL_LABEL = "TOTAL"
GROUP_PREFIX = "[GROUP]"

_DIMENSION_LABELS = {
    GroupByDimension.MEMBER: "Member",
    GroupByDimension.CLIENT: "Client",
    GroupByDimension.PROJECT: "Project",
    GroupByDimension.TEAM: "Team",
}

_DURATION_COLUMN = EXPORT_HEADERS.index("Duration") + 1


class ExcelReportRenderer:
    def render(self, ctx: ExcelReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        self.header_font = Font(bold=True)
        self.center = Alignment(horizontal="center")
        self.thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="E5E7EB")
        self.group_fill = PatternFill("solid", fgColor="F3F4F6")
        self.total_fill = PatternFill("solid", fgColor="DBEAFE")

        ws = wb.active
        ws.title = ctx.sheet_title
        for col_index, h in enumerate(EXPORT_HEADERS, start=1):
            cell = ws.cell(row=1, column=col_index, value=h)
            cell.font = self.header_font
            cell.alignment = self.center
            cell.fill = header_fill
            cell.border = self.thin_border

        if ctx.grouping is None or ctx.grouping.dimension == GroupByDimension.NONE:
            self._write_flat(ws, ctx)
        else:
            self._write_grouped(ws, ctx)

        self._fit_columns(ws)
        ws.freeze_panes = "A2"
        wb.save(output_path)
        return output_path

    def _write_flat(self, ws, ctx: ExcelReportContext) -> None:
        for row_index, entry in enumerate(ctx.entries, start=2):
            self._write_entry(ws, row_index, ctx.lookups.describe(entry))

    def _write_grouped(self, ws, ctx: ExcelReportContext) -> None:
        dimension_label = _DIMENSION_LABELS.get(ctx.grouping.dimension, "")
        row_index = 2
        total_minutes = 0
        for group in ctx.grouping.groups:
            ws.cell(row_index, 1, f"{GROUP_PREFIX} {dimension_label}: {group.label}")
            ws.cell(row_index, _DURATION_COLUMN, format_duration(group.total_minutes))
            self._style_row(ws, row_index, self.group_fill)
            row_index += 1
            total_minutes += group.total_minutes

            for entry in group.entries:
                self._write_entry(ws, row_index, ctx.lookups.describe(entry))
                ws.row_dimensions[row_index].outline_level = 1
                row_index += 1

        ws.cell(row_index, 1, TOTAL_LABEL)
        ws.cell(row_index, _DURATION_COLUMN, format_duration(total_minutes))
        self._style_row(ws, row_index, self.total_fill)
        ws.sheet_properties.outlinePr.summaryBelow = False

    def _write_entry(self, ws, row_index: int, values: dict) -> None:
        values = dict(values)
        values["Duration"] = format_duration(values["Duration"])
        values["Billable"] = "Yes" if values["Billable"] else "No"
        for col_index, h in enumerate(EXPORT_HEADERS, start=1):
            ws.cell(row_index, col_index, values[h]).border = self.thin_border

    def _style_row(self, ws, row_index: int, fill: PatternFill) -> None:
        for col_index in range(1, len(EXPORT_HEADERS) + 1):
            cell = ws.cell(row_index, col_index)
            cell.font = self.header_font
            cell.fill = fill
            cell.border = self.thin_border

    @staticmethod
    def _fit_columns(ws) -> None:
        widths = [10] * len(EXPORT_HEADERS)
        for row in ws.iter_rows(max_col=len(EXPORT_HEADERS)):
            for index, cell in enumerate(row):
                if cell.value is not None:
                    widths[index] = max(widths[index], len(str(cell.value)) + 2)
        for col_index, width in enumerate(widths, start=1):
            ws.column_dimensions[get_column_letter(col_index)].width = min(width, 60)
