from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import WorkspaceRepository
from core.models import Workspace, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext

logger = logging.getLogger(__name__)


class WorkspaceSettingsMixin:
    _session: Session
    _workspace_repo: WorkspaceRepository
    _user_session: UserSessionContext | None

    def update_workspace(
        self,
        workspace_id: str,
        name: str | None = None,
        currency: str | None = None,
        timezone: str | None = None,
        week_starts_on: int | None = None,
    ) -> Workspace:
        require_capability(self._user_session, Capability.SETTINGS_WORKSPACE, operation_label="update workspace")
        workspace = self._workspace_repo.get(workspace_id)
        if workspace is None:
            raise NotFoundError("Workspace not found.", code="WORKSPACE_NOT_FOUND")

        if name is not None:
            workspace.name = self._required_text(name, "Workspace name", "WORKSPACE_NAME_EMPTY")
        if currency is not None:
            workspace.currency = self._required_text(currency, "Currency", "WORKSPACE_CURRENCY_REQUIRED").upper()
        if timezone is not None:
            workspace.timezone = self._required_text(timezone, "Timezone", "WORKSPACE_TIMEZONE_REQUIRED")
        if week_starts_on is not None:
            if isinstance(week_starts_on, bool) or not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
                raise ValidationError(
                    "Week start must be a weekday number from 0 (Monday) to 6 (Sunday).",
                    code="WORKSPACE_INVALID_WEEK_START",
                )
            workspace.week_starts_on = week_starts_on
        workspace.updated_at = utc_now()

        try:
            self._workspace_repo.update(workspace)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error updating workspace: %s", e)
            raise
        logger.info("Updated workspace %s - %s", workspace.id, workspace.name)
        domain_events.settings_changed.emit(workspace.id)
        return workspace

    @staticmethod
    def _required_text(value: str, label: str, code: str) -> str:
        clean = (value or "").strip()
        if not clean:
            raise ValidationError(f"{label} is required.", code=code)
        return clean


__all__ = ["WorkspaceSettingsMixin"]
