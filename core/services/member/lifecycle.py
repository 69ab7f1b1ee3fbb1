from __future__ import annotations

import logging
import re
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.interfaces import UserRepository
from core.models import User, UserRole, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class MemberLifecycleMixin:
    _session: Session
    _user_repo: UserRepository
    _user_session: UserSessionContext | None

    def invite_member(
        self,
        workspace_id: str,
        email: str,
        name: str | None = None,
        role: UserRole = UserRole.EMPLOYEE,
    ) -> User:
        require_capability(self._user_session, Capability.TEAM_INVITE, operation_label="invite member")
        normalized = self._normalize_email(email)
        if self._user_repo.get_by_email(normalized) is not None:
            raise ValidationError("A member with this e-mail already exists.", code="EMAIL_EXISTS")
        display_name = (name or "").strip() or normalized.split("@", 1)[0]
        user = User.create(workspace_id=workspace_id, name=display_name, email=normalized, role=UserRole(role))
        try:
            self._user_repo.add(user)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error inviting member: %s", e)
            raise
        logger.info("Invited %s as %s", user.email, user.role.value)
        domain_events.members_changed.emit(user.id)
        return user

    def change_role(self, user_id: str, role: UserRole) -> User:
        require_capability(self._user_session, Capability.TEAM_CHANGE_ROLE, operation_label="change role")
        user = self._require_member(user_id)
        new_role = UserRole(role)
        if user.role == UserRole.ADMIN and new_role != UserRole.ADMIN:
            admins = [
                member
                for member in self._user_repo.list_by_workspace(user.workspace_id)
                if member.role == UserRole.ADMIN
            ]
            if len(admins) <= 1:
                raise BusinessRuleError(
                    "The workspace must keep at least one admin.",
                    code="LAST_ADMIN",
                )
        user.role = new_role
        user.updated_at = utc_now()
        try:
            self._user_repo.update(user)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info("Changed role of %s to %s", user.email, new_role.value)
        domain_events.members_changed.emit(user.id)
        return user

    def list_members(self, workspace_id: str) -> List[User]:
        require_capability(self._user_session, Capability.TEAM_READ, operation_label="list members")
        return sorted(self._user_repo.list_by_workspace(workspace_id), key=lambda user: user.name.casefold())

    def get_member(self, user_id: str) -> User:
        return self._require_member(user_id)

    def _require_member(self, user_id: str) -> User:
        user = self._user_repo.get(user_id)
        if not user:
            raise NotFoundError("Member not found.", code="USER_NOT_FOUND")
        return user

    @staticmethod
    def _normalize_email(email: str) -> str:
        normalized = (email or "").strip().lower()
        if not normalized:
            raise ValidationError("E-mail is required.", code="EMAIL_REQUIRED")
        if not _EMAIL_RE.match(normalized):
            raise ValidationError("Invalid e-mail address.", code="EMAIL_INVALID")
        return normalized


__all__ = ["MemberLifecycleMixin"]
