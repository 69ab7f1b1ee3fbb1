from __future__ import annotations

from sqlalchemy.orm import Session

from core.exceptions import AuthenticationRequiredError
from core.interfaces import (
    CategoryRepository,
    ProjectRepository,
    TagRepository,
    TimeEntryRepository,
    UserSettingsRepository,
)
from core.services.auth.session import UserSessionContext
from core.services.time_entry.lifecycle import TimeEntryLifecycleMixin
from core.services.time_entry.query import TimeEntryQueryMixin


class TimeEntryService(TimeEntryLifecycleMixin, TimeEntryQueryMixin):
    """Time entry service orchestrator: wiring repositories + composing mixins."""

    def __init__(
        self,
        session: Session,
        entry_repo: TimeEntryRepository,
        project_repo: ProjectRepository,
        tag_repo: TagRepository,
        user_session: UserSessionContext | None = None,
        category_repo: CategoryRepository | None = None,
        settings_repo: UserSettingsRepository | None = None,
    ):
        self._session: Session = session
        self._entry_repo: TimeEntryRepository = entry_repo
        self._project_repo: ProjectRepository = project_repo
        self._tag_repo: TagRepository = tag_repo
        self._user_session: UserSessionContext | None = user_session
        self._category_repo: CategoryRepository | None = category_repo
        self._settings_repo: UserSettingsRepository | None = settings_repo

    def _current_workspace_id(self) -> str:
        principal = self._user_session.principal if self._user_session is not None else None
        if principal is None:
            raise AuthenticationRequiredError("No workspace selected. Sign in first.")
        return principal.workspace_id


__all__ = ["TimeEntryService"]
