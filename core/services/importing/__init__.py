from core.services.importing.columns import CSV_IMPORT_HEADERS
from core.services.importing.csv_parser import ParsedCsv, parse_csv, split_csv_line
from core.services.importing.models import (
    CsvStatus,
    ImportPreview,
    ImportRow,
    ImportRowError,
    ImportSummary,
    ImportValidationResult,
    ProjectImportSummary,
    ResolvedEntry,
)
from core.services.importing.service import ImportService
from core.services.importing.template import TEMPLATE_FILENAME, generate_csv_template
from core.services.importing.validator import validate_headers, validate_import

__all__ = [
    "CSV_IMPORT_HEADERS",
    "CsvStatus",
    "ImportPreview",
    "ImportRow",
    "ImportRowError",
    "ImportService",
    "ImportSummary",
    "ImportValidationResult",
    "ParsedCsv",
    "ProjectImportSummary",
    "ResolvedEntry",
    "TEMPLATE_FILENAME",
    "generate_csv_template",
    "parse_csv",
    "split_csv_line",
    "validate_headers",
    "validate_import",
]
