from __future__ import annotations

from typing import List

from core.interfaces import ProjectRepository, TimeEntryRepository
from core.models import TimeEntry
from core.services.auth.session import UserSessionContext
from core.services.time_entry.visibility import filter_visible_entries, sort_entries_newest_first


class TimeEntryQueryMixin:
    _entry_repo: TimeEntryRepository
    _project_repo: ProjectRepository
    _user_session: UserSessionContext | None

    def list_entries(self, workspace_id: str | None = None) -> List[TimeEntry]:
        """Entries the signed-in member may see, newest first."""
        workspace_id = workspace_id or self._current_workspace_id()
        entries = self._entry_repo.list_by_workspace(workspace_id)
        projects = self._project_repo.list_by_workspace(workspace_id)
        return sort_entries_newest_first(
            filter_visible_entries(entries, projects, self._user_session)
        )

    def list_entries_in_range(
        self,
        start_date: str,
        end_date: str,
        workspace_id: str | None = None,
    ) -> List[TimeEntry]:
        return [
            entry
            for entry in self.list_entries(workspace_id)
            if start_date <= entry.date <= end_date
        ]

    def get_entry(self, entry_id: str) -> TimeEntry | None:
        entry = self._entry_repo.get(entry_id)
        if entry is None:
            return None
        projects = self._project_repo.list_by_workspace(entry.workspace_id)
        visible = filter_visible_entries([entry], projects, self._user_session)
        return visible[0] if visible else None


__all__ = ["TimeEntryQueryMixin"]
