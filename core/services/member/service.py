from __future__ import annotations

import logging
import os

from sqlalchemy.orm import Session

from core.interfaces import TeamRepository, UserRepository, WorkspaceRepository
from core.models import DEFAULT_CURRENCY, DEFAULT_TIMEZONE, User, UserRole, Workspace
from core.services.auth.session import UserSessionContext
from core.services.member.lifecycle import MemberLifecycleMixin
from core.services.member.teams import TeamMixin

logger = logging.getLogger(__name__)


class MemberService(MemberLifecycleMixin, TeamMixin):
    def __init__(
        self,
        session: Session,
        workspace_repo: WorkspaceRepository,
        user_repo: UserRepository,
        team_repo: TeamRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._workspace_repo: WorkspaceRepository = workspace_repo
        self._user_repo: UserRepository = user_repo
        self._team_repo: TeamRepository = team_repo
        self._user_session: UserSessionContext | None = user_session

    def bootstrap_defaults(self) -> User:
        """Make sure a workspace and its first admin exist; returns the admin."""
        admin_email = (os.getenv("TT_ADMIN_EMAIL", "admin@example.com").strip() or "admin@example.com").lower()
        admin_name = os.getenv("TT_ADMIN_NAME", "Administrator").strip() or "Administrator"

        workspaces = self._workspace_repo.list_all()
        if workspaces:
            workspace = workspaces[0]
        else:
            workspace = Workspace.create(
                name=os.getenv("TT_WORKSPACE_NAME", "My Workspace").strip() or "My Workspace",
                currency=os.getenv("TT_DEFAULT_CURRENCY", DEFAULT_CURRENCY).strip().upper() or DEFAULT_CURRENCY,
                timezone=os.getenv("TT_DEFAULT_TIMEZONE", DEFAULT_TIMEZONE).strip() or DEFAULT_TIMEZONE,
            )
            self._workspace_repo.add(workspace)
            self._session.flush()
            logger.info("Created workspace %s - %s", workspace.id, workspace.name)

        admin = self._user_repo.get_by_email(admin_email)
        if admin is None:
            admin = User.create(
                workspace_id=workspace.id,
                name=admin_name,
                email=admin_email,
                role=UserRole.ADMIN,
            )
            self._user_repo.add(admin)
            logger.info("Created bootstrap admin %s", admin.email)

        self._session.commit()
        return admin

    def get_workspace(self, workspace_id: str) -> Workspace | None:
        return self._workspace_repo.get(workspace_id)


__all__ = ["MemberService"]
