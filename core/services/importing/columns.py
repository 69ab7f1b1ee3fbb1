from __future__ import annotations

COLUMN_DESCRIPTION = "Description"
COLUMN_PROJECT = "Project"
COLUMN_DATE = "Date"
COLUMN_START = "Start"
COLUMN_END = "End"
COLUMN_TAGS = "Tags"
COLUMN_BILLABLE = "Billable"
COLUMN_DURATION = "Duration"

CSV_IMPORT_HEADERS: tuple[str, ...] = (
    COLUMN_DESCRIPTION,
    COLUMN_PROJECT,
    COLUMN_DATE,
    COLUMN_START,
    COLUMN_END,
    COLUMN_TAGS,
    COLUMN_BILLABLE,
)

HEADER_FIELD = "Header"
HEADER_ROW = 1
FIRST_DATA_ROW = 2

TAG_SEPARATOR = ";"
BILLABLE_TRUE_TOKENS = frozenset({"yes", "true", "tak", "1"})

# Entry field names -> column names shown to the user.
FIELD_TO_COLUMN: dict[str, str] = {
    "description": COLUMN_DESCRIPTION,
    "date": COLUMN_DATE,
    "start_time": COLUMN_START,
    "end_time": COLUMN_END,
    "duration_minutes": COLUMN_DURATION,
}

NO_PROJECT_KEY = "__none__"
NO_PROJECT_LABEL = "No project"
NO_PROJECT_COLOR = "#6B7280"

__all__ = [
    "COLUMN_DESCRIPTION",
    "COLUMN_PROJECT",
    "COLUMN_DATE",
    "COLUMN_START",
    "COLUMN_END",
    "COLUMN_TAGS",
    "COLUMN_BILLABLE",
    "COLUMN_DURATION",
    "CSV_IMPORT_HEADERS",
    "HEADER_FIELD",
    "HEADER_ROW",
    "FIRST_DATA_ROW",
    "TAG_SEPARATOR",
    "BILLABLE_TRUE_TOKENS",
    "FIELD_TO_COLUMN",
    "NO_PROJECT_KEY",
    "NO_PROJECT_LABEL",
    "NO_PROJECT_COLOR",
]
