from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date as _date
from typing import List

from core.exceptions import ValidationError
from core.services.common.durations import parse_hhmm

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MIN_DURATION_MINUTES = 1


@dataclass(frozen=True)
class FieldIssue:
    field: str
    message: str


def validate_time_entry_fields(
    *,
    workspace_id: str,
    user_id: str,
    description: str,
    date: str,
    start_time: str,
    end_time: str,
    duration_minutes: int,
) -> List[FieldIssue]:
    """Run the structural entry checks in a fixed order and collect every issue.

    Shared by manual entry forms and the CSV importer, which reports all
    issues instead of stopping at the first one.
    """
    issues: List[FieldIssue] = []
    if not (workspace_id or "").strip():
        issues.append(FieldIssue("workspace_id", "Workspace is required."))
    if not (user_id or "").strip():
        issues.append(FieldIssue("user_id", "User is required."))
    if not (description or "").strip():
        issues.append(FieldIssue("description", "Description is required."))
    if not _is_valid_date(date):
        issues.append(FieldIssue("date", "Invalid date format (YYYY-MM-DD)."))
    if parse_hhmm(start_time) is None:
        issues.append(FieldIssue("start_time", "Invalid time format (HH:MM)."))
    if parse_hhmm(end_time) is None:
        issues.append(FieldIssue("end_time", "Invalid time format (HH:MM)."))
    if (
        not isinstance(duration_minutes, int)
        or isinstance(duration_minutes, bool)
        or duration_minutes < MIN_DURATION_MINUTES
    ):
        issues.append(FieldIssue("duration_minutes", "Duration must be greater than 0."))
    return issues


def _is_valid_date(value: str) -> bool:
    text = (value or "").strip()
    if not _DATE_RE.match(text):
        return False
    try:
        _date.fromisoformat(text)
    except ValueError:
        return False
    return True


class TimeEntryValidationMixin:
    @staticmethod
    def _raise_on_issues(issues: List[FieldIssue]) -> None:
        if not issues:
            return
        first = issues[0]
        raise ValidationError(f"{first.field}: {first.message}", code="TIME_ENTRY_INVALID")


__all__ = [
    "FieldIssue",
    "MIN_DURATION_MINUTES",
    "validate_time_entry_fields",
    "TimeEntryValidationMixin",
]
