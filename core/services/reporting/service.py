from __future__ import annotations

from typing import List

from core.interfaces import (
    ClientRepository,
    ProjectRepository,
    TagRepository,
    TeamRepository,
    TimeEntryRepository,
    UserRepository,
)
from core.exceptions import AuthenticationRequiredError
from core.models import TimeEntry
from core.services.auth.authorization import require_any_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.time_entry.visibility import filter_visible_entries, sort_entries_newest_first

from .filtering import ReportingFilterMixin
from .grouping import ReportingGroupingMixin
from .lookups import ExportLookups
from .models import ReportFilter
from .timesheet import ReportingTimesheetMixin


class ReportingService(
    ReportingFilterMixin,
    ReportingGroupingMixin,
    ReportingTimesheetMixin,
):
    def __init__(
        self,
        entry_repo: TimeEntryRepository,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        user_repo: UserRepository,
        team_repo: TeamRepository,
        tag_repo: TagRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._entry_repo: TimeEntryRepository = entry_repo
        self._project_repo: ProjectRepository = project_repo
        self._client_repo: ClientRepository = client_repo
        self._user_repo: UserRepository = user_repo
        self._team_repo: TeamRepository = team_repo
        self._tag_repo: TagRepository = tag_repo
        self._user_session: UserSessionContext | None = user_session

    def report_entries(self, report_filter: ReportFilter | None = None) -> List[TimeEntry]:
        """Visible entries of the signed-in member's workspace, filtered and newest first."""
        require_any_capability(
            self._user_session,
            [Capability.REPORTS_OWN, Capability.REPORTS_ASSIGNED_PROJECTS, Capability.REPORTS_ALL],
            operation_label="view reports",
        )
        principal = self._user_session.principal if self._user_session is not None else None
        if principal is None:
            raise AuthenticationRequiredError("Sign in to view reports.")
        entries = self._entry_repo.list_by_workspace(principal.workspace_id)
        projects = self._project_repo.list_by_workspace(principal.workspace_id)
        visible = filter_visible_entries(entries, projects, self._user_session)
        return sort_entries_newest_first(self.filter_entries(visible, report_filter or ReportFilter()))

    def export_lookups(self, workspace_id: str) -> ExportLookups:
        """Name lookups the CSV and Excel exports resolve entry references against."""
        return ExportLookups.build(
            users=self._user_repo.list_by_workspace(workspace_id),
            teams=self._team_repo.list_by_workspace(workspace_id),
            projects=self._project_repo.list_by_workspace(workspace_id),
            clients=self._client_repo.list_by_workspace(workspace_id),
            tags=self._tag_repo.list_by_workspace(workspace_id),
        )
