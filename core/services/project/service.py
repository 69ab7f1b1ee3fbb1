from __future__ import annotations

from sqlalchemy.orm import Session

from core.interfaces import ClientRepository, ProjectRepository
from core.services.auth.session import UserSessionContext
from core.services.project.lifecycle import ProjectLifecycleMixin
from core.services.project.query import ProjectQueryMixin


class ProjectService(ProjectLifecycleMixin, ProjectQueryMixin):
    """Project service orchestrator: wiring repositories + composing mixins."""

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo
        self._client_repo: ClientRepository = client_repo
        self._user_session: UserSessionContext | None = user_session


__all__ = ["ProjectService"]
