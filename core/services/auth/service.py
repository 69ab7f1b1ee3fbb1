from __future__ import annotations

import logging

from core.exceptions import NotFoundError, ValidationError
from core.interfaces import UserRepository
from core.models import User
from core.services.auth.policy import get_capabilities_for_role
from core.services.auth.session import UserSessionContext, UserSessionPrincipal

logger = logging.getLogger(__name__)


class AuthService:
    """Password-less sign-in: resolves a member by e-mail and installs the principal."""

    def __init__(
        self,
        user_repo: UserRepository,
        user_session: UserSessionContext,
    ):
        self._user_repo: UserRepository = user_repo
        self._user_session: UserSessionContext = user_session

    def sign_in(self, email: str) -> UserSessionPrincipal:
        normalized = (email or "").strip().lower()
        if not normalized:
            raise ValidationError("E-mail is required.", code="EMAIL_REQUIRED")
        user = self._user_repo.get_by_email(normalized)
        if user is None:
            raise NotFoundError("No member with this e-mail address.", code="USER_NOT_FOUND")
        principal = self.build_principal(user)
        self._user_session.set_principal(principal)
        logger.info("Signed in %s as %s", user.email, user.role.value)
        return principal

    def sign_out(self) -> None:
        self._user_session.clear()

    def refresh(self) -> UserSessionPrincipal | None:
        """Rebuild the principal after a role change of the signed-in member."""
        principal = self._user_session.principal
        if principal is None:
            return None
        user = self._user_repo.get(principal.user_id)
        if user is None:
            self._user_session.clear()
            return None
        principal = self.build_principal(user)
        self._user_session.set_principal(principal)
        return principal

    @staticmethod
    def build_principal(user: User) -> UserSessionPrincipal:
        return UserSessionPrincipal(
            user_id=user.id,
            workspace_id=user.workspace_id,
            name=user.name,
            email=user.email,
            role=user.role,
            capabilities=get_capabilities_for_role(user.role),
        )


__all__ = ["AuthService"]
