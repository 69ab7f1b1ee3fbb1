from __future__ import annotations

from core.models import TimeEntry
from infra.db.models import TimeEntryORM


def time_entry_to_orm(entry: TimeEntry) -> TimeEntryORM:
    return TimeEntryORM(
        id=entry.id,
        workspace_id=entry.workspace_id,
        user_id=entry.user_id,
        description=entry.description,
        date=entry.date,
        start_time=entry.start_time,
        end_time=entry.end_time,
        duration_minutes=entry.duration_minutes,
        project_id=entry.project_id,
        tag_ids=list(entry.tag_ids),
        billable=entry.billable,
        category_id=entry.category_id,
        created_at=entry.created_at,
        updated_at=entry.updated_at,
    )


def time_entry_from_orm(obj: TimeEntryORM) -> TimeEntry:
    return TimeEntry(
        id=obj.id,
        workspace_id=obj.workspace_id,
        user_id=obj.user_id,
        description=obj.description,
        date=obj.date,
        start_time=obj.start_time,
        end_time=obj.end_time,
        duration_minutes=obj.duration_minutes,
        project_id=obj.project_id,
        tag_ids=list(obj.tag_ids or []),
        billable=obj.billable,
        category_id=obj.category_id,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )
