from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class CsvStatus(str, Enum):
    EMPTY = "empty"
    HEADER_ONLY = "header_only"
    OK = "ok"


@dataclass(frozen=True)
class ImportRow:
    row_number: int
    fields: Dict[str, str]

    def get(self, column: str) -> str:
        return self.fields.get(column) or ""


@dataclass(frozen=True)
class ImportRowError:
    row: int
    field: str
    message: str


@dataclass
class ResolvedEntry:
    workspace_id: str
    user_id: str
    project_id: Optional[str]
    description: str
    date: str
    start_time: str
    end_time: str
    duration_minutes: int
    tag_ids: List[str] = field(default_factory=list)
    billable: bool = False


@dataclass
class ProjectImportSummary:
    project_id: Optional[str]
    name: str
    color: str
    count: int = 0
    minutes: int = 0


@dataclass
class ImportSummary:
    total_entries: int = 0
    total_minutes: int = 0
    by_project: List[ProjectImportSummary] = field(default_factory=list)


@dataclass
class ImportValidationResult:
    valid: bool
    entries: List[ResolvedEntry]
    errors: List[ImportRowError]
    summary: ImportSummary


@dataclass
class ImportPreview:
    status: CsvStatus
    result: ImportValidationResult

    @property
    def valid(self) -> bool:
        return self.status == CsvStatus.OK and self.result.valid


__all__ = [
    "CsvStatus",
    "ImportRow",
    "ImportRowError",
    "ResolvedEntry",
    "ProjectImportSummary",
    "ImportSummary",
    "ImportValidationResult",
    "ImportPreview",
]
