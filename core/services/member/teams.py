from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import TeamRepository, UserRepository
from core.models import Team, User, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.common.validation import CatalogValidationMixin

logger = logging.getLogger(__name__)


class TeamMixin(CatalogValidationMixin):
    _session: Session
    _user_repo: UserRepository
    _team_repo: TeamRepository
    _user_session: UserSessionContext | None

    def create_team(self, workspace_id: str, name: str) -> Team:
        require_capability(self._user_session, Capability.TEAM_WRITE, operation_label="create team")
        clean_name = self._clean_name(name, label="Team", code_prefix="TEAM")
        self._ensure_unique_name(
            clean_name,
            self._team_repo.list_by_workspace(workspace_id),
            label="Team",
            code_prefix="TEAM",
        )
        team = Team.create(workspace_id=workspace_id, name=clean_name)
        try:
            self._team_repo.add(team)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating team: %s", e)
            raise
        logger.info("Created team %s - %s", team.id, team.name)
        domain_events.members_changed.emit(team.id)
        return team

    def list_teams(self, workspace_id: str) -> List[Team]:
        require_capability(self._user_session, Capability.TEAM_READ, operation_label="list teams")
        return sorted(self._team_repo.list_by_workspace(workspace_id), key=lambda team: team.name.casefold())

    def add_to_team(self, user_id: str, team_id: str) -> User:
        require_capability(self._user_session, Capability.TEAM_WRITE, operation_label="change team membership")
        user, _ = self._require_membership_pair(user_id, team_id)
        if team_id in user.team_ids:
            return user
        user.team_ids = [*user.team_ids, team_id]
        return self._save_membership(user)

    def remove_from_team(self, user_id: str, team_id: str) -> User:
        require_capability(self._user_session, Capability.TEAM_WRITE, operation_label="change team membership")
        user, _ = self._require_membership_pair(user_id, team_id)
        if team_id not in user.team_ids:
            return user
        user.team_ids = [existing for existing in user.team_ids if existing != team_id]
        return self._save_membership(user)

    def _save_membership(self, user: User) -> User:
        user.updated_at = utc_now()
        try:
            self._user_repo.update(user)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.members_changed.emit(user.id)
        return user

    def _require_membership_pair(self, user_id: str, team_id: str) -> tuple[User, Team]:
        user = self._user_repo.get(user_id)
        if user is None:
            raise NotFoundError("Member not found.", code="USER_NOT_FOUND")
        team = self._team_repo.get(team_id)
        if team is None:
            raise NotFoundError("Team not found.", code="TEAM_NOT_FOUND")
        return user, team


__all__ = ["TeamMixin"]
