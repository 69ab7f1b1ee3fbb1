from dataclasses import dataclass
from typing import List, Optional

from core.models import TimeEntry
from core.services.reporting.lookups import EXPORT_HEADERS, ExportLookups
from core.services.reporting.models import GroupedEntries

__all__ = ["EXPORT_HEADERS", "ExportLookups", "ExcelReportContext"]


@dataclass
class ExcelReportContext:
    entries: List[TimeEntry]
    lookups: ExportLookups
    grouping: Optional[GroupedEntries] = None
    sheet_title: str = "Report"
