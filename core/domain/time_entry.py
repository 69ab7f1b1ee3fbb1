from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.domain.identifiers import generate_id, utc_now


@dataclass
class TimeEntry:
    id: str
    workspace_id: str
    user_id: str
    description: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    duration_minutes: int
    project_id: Optional[str] = None
    tag_ids: List[str] = field(default_factory=list)
    billable: bool = False
    category_id: Optional[str] = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(
        workspace_id: str,
        user_id: str,
        description: str,
        date: str,
        start_time: str,
        end_time: str,
        duration_minutes: int,
        project_id: str | None = None,
        tag_ids: List[str] | None = None,
        billable: bool = False,
        category_id: str | None = None,
    ) -> "TimeEntry":
        now = utc_now()
        return TimeEntry(
            id=generate_id(),
            workspace_id=workspace_id,
            user_id=user_id,
            description=description,
            date=date,
            start_time=start_time,
            end_time=end_time,
            duration_minutes=duration_minutes,
            project_id=project_id,
            tag_ids=list(tag_ids or []),
            billable=billable,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )


__all__ = ["TimeEntry"]
