from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import TimeEntryRepository
from core.models import TimeEntry
from infra.db.models import TimeEntryORM
from infra.db.time_entry.mapper import time_entry_from_orm, time_entry_to_orm


class SqlAlchemyTimeEntryRepository(TimeEntryRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, entry: TimeEntry) -> None:
        self.session.add(time_entry_to_orm(entry))

    def add_many(self, entries: List[TimeEntry]) -> None:
        self.session.add_all([time_entry_to_orm(entry) for entry in entries])

    def update(self, entry: TimeEntry) -> None:
        self.session.merge(time_entry_to_orm(entry))

    def delete(self, entry_id: str) -> None:
        self.session.query(TimeEntryORM).filter_by(id=entry_id).delete()

    def get(self, entry_id: str) -> Optional[TimeEntry]:
        obj = self.session.get(TimeEntryORM, entry_id)
        return time_entry_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[TimeEntry]:
        stmt = select(TimeEntryORM).where(TimeEntryORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [time_entry_from_orm(row) for row in rows]

    def list_in_range(self, workspace_id: str, start: str, end: str) -> List[TimeEntry]:
        # ISO dates compare correctly as strings
        stmt = select(TimeEntryORM).where(
            TimeEntryORM.workspace_id == workspace_id,
            TimeEntryORM.date >= start,
            TimeEntryORM.date <= end,
        )
        rows = self.session.execute(stmt).scalars().all()
        return [time_entry_from_orm(row) for row in rows]

    def list_all(self) -> List[TimeEntry]:
        rows = self.session.execute(select(TimeEntryORM)).scalars().all()
        return [time_entry_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyTimeEntryRepository"]
