from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import ProjectRepository, TagRepository, UserSettingsRepository, WorkspaceRepository
from core.services.auth.session import UserSessionContext
from core.services.settings.preferences import UserSettingsMixin
from core.services.settings.workspace import WorkspaceSettingsMixin


class SettingsService(WorkspaceSettingsMixin, UserSettingsMixin):
    """Workspace configuration and per-member entry defaults."""

    def __init__(
        self,
        session: Session,
        workspace_repo: WorkspaceRepository,
        settings_repo: UserSettingsRepository,
        project_repo: ProjectRepository,
        tag_repo: TagRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._workspace_repo: WorkspaceRepository = workspace_repo
        self._settings_repo: UserSettingsRepository = settings_repo
        self._project_repo: ProjectRepository = project_repo
        self._tag_repo: TagRepository = tag_repo
        self._user_session: UserSessionContext | None = user_session


__all__ = ["SettingsService"]
