from .service import ReportingService
from .grouping import SORT_BY_DURATION, SORT_BY_NAME
from .lookups import EXPORT_HEADERS, ExportLookups
from .models import (
    EntryGroup,
    GroupedEntries,
    ReportFilter,
    ReportTotals,
    TimesheetRow,
    WeeklyTimesheet,
)

__all__ = [
    "ReportingService",
    "EXPORT_HEADERS",
    "ExportLookups",
    "SORT_BY_NAME",
    "SORT_BY_DURATION",
    "EntryGroup",
    "GroupedEntries",
    "ReportFilter",
    "ReportTotals",
    "TimesheetRow",
    "WeeklyTimesheet",
]
