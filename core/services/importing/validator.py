from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Union

from core.services.common.durations import interval_minutes
from core.services.importing.columns import (
    BILLABLE_TRUE_TOKENS,
    COLUMN_BILLABLE,
    COLUMN_DATE,
    COLUMN_DESCRIPTION,
    COLUMN_END,
    COLUMN_PROJECT,
    COLUMN_START,
    COLUMN_TAGS,
    CSV_IMPORT_HEADERS,
    FIELD_TO_COLUMN,
    FIRST_DATA_ROW,
    HEADER_FIELD,
    HEADER_ROW,
    NO_PROJECT_COLOR,
    NO_PROJECT_KEY,
    NO_PROJECT_LABEL,
    TAG_SEPARATOR,
)
from core.services.importing.csv_parser import split_csv_line, strip_bom
from core.services.importing.models import (
    ImportRow,
    ImportRowError,
    ImportSummary,
    ImportValidationResult,
    ProjectImportSummary,
    ResolvedEntry,
)
from core.services.time_entry.validation import validate_time_entry_fields


class CatalogItem(Protocol):
    id: str
    name: str
    color: str


RowLike = Union[ImportRow, Mapping[str, str]]


def validate_headers(header_line: str | Sequence[str]) -> List[ImportRowError]:
    """One error per missing required column; an empty list means the header is usable."""
    if isinstance(header_line, str):
        names = split_csv_line(strip_bom(header_line))
    else:
        names = list(header_line)
    present = {name.strip().strip('"').strip() for name in names}
    return [
        ImportRowError(
            row=HEADER_ROW,
            field=HEADER_FIELD,
            message=f'missing required column: "{required}"',
        )
        for required in CSV_IMPORT_HEADERS
        if required not in present
    ]


def parse_billable(value: str) -> bool:
    return (value or "").strip().lower() in BILLABLE_TRUE_TOKENS


def split_tag_names(value: str) -> List[str]:
    return [name.strip() for name in (value or "").split(TAG_SEPARATOR) if name.strip()]


def validate_import(
    rows: Sequence[RowLike],
    projects: Sequence[CatalogItem],
    tags: Sequence[CatalogItem],
    user_id: str,
    workspace_id: str,
) -> ImportValidationResult:
    """Resolve every row against the project/tag catalogs and collect all problems.

    Never raises for bad data. The batch is all-or-nothing: when any error
    exists the returned entry list is empty, while the summary still covers
    every row so the caller can show what would have been imported.
    """
    projects_by_name = _index_by_name(projects)
    tags_by_name = _index_by_name(tags)

    errors: List[ImportRowError] = []
    entries: List[ResolvedEntry] = []
    buckets: Dict[str, ProjectImportSummary] = {}
    total_minutes = 0

    for index, raw in enumerate(rows):
        row_number = index + FIRST_DATA_ROW
        row = _fields_of(raw)

        project = None
        project_name = row.get(COLUMN_PROJECT, "").strip()
        if project_name:
            project = projects_by_name.get(project_name.lower())
            if project is None:
                errors.append(
                    ImportRowError(row_number, COLUMN_PROJECT, f'unknown project: "{project_name}"')
                )

        tag_ids: List[str] = []
        for tag_name in split_tag_names(row.get(COLUMN_TAGS, "")):
            tag = tags_by_name.get(tag_name.lower())
            if tag is None:
                errors.append(ImportRowError(row_number, COLUMN_TAGS, f'unknown tag: "{tag_name}"'))
            else:
                tag_ids.append(tag.id)

        start_time = row.get(COLUMN_START, "").strip()
        end_time = row.get(COLUMN_END, "").strip()
        duration = interval_minutes(start_time, end_time) if start_time and end_time else 0

        entry = ResolvedEntry(
            workspace_id=workspace_id,
            user_id=user_id,
            project_id=project.id if project is not None else None,
            description=row.get(COLUMN_DESCRIPTION, "").strip(),
            date=row.get(COLUMN_DATE, "").strip(),
            start_time=start_time,
            end_time=end_time,
            duration_minutes=duration,
            tag_ids=tag_ids,
            billable=parse_billable(row.get(COLUMN_BILLABLE, "")),
        )

        for issue in validate_time_entry_fields(
            workspace_id=entry.workspace_id,
            user_id=entry.user_id,
            description=entry.description,
            date=entry.date,
            start_time=entry.start_time,
            end_time=entry.end_time,
            duration_minutes=entry.duration_minutes,
        ):
            errors.append(
                ImportRowError(row_number, FIELD_TO_COLUMN.get(issue.field, issue.field), issue.message)
            )

        entries.append(entry)
        _add_to_bucket(buckets, project, duration)
        total_minutes += duration

    valid = not errors
    summary = ImportSummary(
        total_entries=len(rows),
        total_minutes=total_minutes,
        by_project=sorted(buckets.values(), key=lambda bucket: -bucket.minutes),
    )
    return ImportValidationResult(
        valid=valid,
        entries=entries if valid else [],
        errors=errors,
        summary=summary,
    )


def _index_by_name(items: Sequence[CatalogItem]) -> Dict[str, CatalogItem]:
    index: Dict[str, CatalogItem] = {}
    for item in items:
        index.setdefault(item.name.strip().lower(), item)
    return index


def _fields_of(raw: RowLike) -> Mapping[str, str]:
    if isinstance(raw, ImportRow):
        return raw.fields
    return {key: (value or "") for key, value in raw.items()}


def _add_to_bucket(
    buckets: Dict[str, ProjectImportSummary],
    project: Optional[CatalogItem],
    minutes: int,
) -> None:
    key = project.id if project is not None else NO_PROJECT_KEY
    bucket = buckets.get(key)
    if bucket is None:
        bucket = ProjectImportSummary(
            project_id=project.id if project is not None else None,
            name=project.name if project is not None else NO_PROJECT_LABEL,
            color=project.color if project is not None else NO_PROJECT_COLOR,
        )
        buckets[key] = bucket
    bucket.count += 1
    bucket.minutes += minutes


__all__ = [
    "validate_headers",
    "validate_import",
    "parse_billable",
    "split_tag_names",
]
