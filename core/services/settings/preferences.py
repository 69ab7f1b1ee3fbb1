from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import AuthenticationRequiredError, NotFoundError, ValidationError
from core.interfaces import ProjectRepository, TagRepository, UserSettingsRepository
from core.models import Theme, UserSettings
from core.services.auth.authorization import current_user_id, require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.common.durations import parse_hhmm

logger = logging.getLogger(__name__)


class UserSettingsMixin:
    _session: Session
    _settings_repo: UserSettingsRepository
    _project_repo: ProjectRepository
    _tag_repo: TagRepository
    _user_session: UserSessionContext | None

    def get_user_settings(self, user_id: str | None = None) -> UserSettings:
        """Stored settings of a member, or unsaved defaults when none exist yet."""
        target = self._settings_owner(user_id, operation_label="read settings")
        return self._settings_repo.get_by_user(target) or UserSettings.create(target)

    def update_user_settings(
        self,
        user_id: str | None = None,
        default_project_id: str | None = None,
        default_tag_ids: Iterable[str] | None = None,
        default_duration_minutes: int | None = None,
        default_start_time: str | None = None,
        theme: Theme | str | None = None,
    ) -> UserSettings:
        """Update given fields only; an empty ``default_project_id`` clears it."""
        target = self._settings_owner(user_id, operation_label="update settings")
        stored = self._settings_repo.get_by_user(target)
        settings = stored or UserSettings.create(target)

        if default_project_id is not None:
            if default_project_id and self._project_repo.get(default_project_id) is None:
                raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
            settings.default_project_id = default_project_id or None
        if default_tag_ids is not None:
            tag_ids = list(default_tag_ids)
            for tag_id in tag_ids:
                if self._tag_repo.get(tag_id) is None:
                    raise NotFoundError(f"Tag not found: {tag_id}", code="TAG_NOT_FOUND")
            settings.default_tag_ids = tag_ids
        if default_duration_minutes is not None:
            valid = isinstance(default_duration_minutes, int) and not isinstance(default_duration_minutes, bool)
            if not valid or default_duration_minutes < 1:
                raise ValidationError(
                    "Default duration must be a whole number of minutes, at least 1.",
                    code="SETTINGS_INVALID_DURATION",
                )
            settings.default_duration_minutes = default_duration_minutes
        if default_start_time is not None:
            clean = default_start_time.strip()
            if parse_hhmm(clean) is None:
                raise ValidationError("Invalid start time format (HH:MM).", code="SETTINGS_INVALID_START_TIME")
            settings.default_start_time = clean
        if theme is not None:
            try:
                settings.theme = Theme(str(getattr(theme, "value", theme)).strip().lower())
            except ValueError as exc:
                raise ValidationError("Theme must be light, dark or system.", code="SETTINGS_INVALID_THEME") from exc

        try:
            if stored is None:
                self._settings_repo.add(settings)
            else:
                self._settings_repo.update(settings)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error saving settings: %s", e)
            raise
        domain_events.settings_changed.emit(target)
        return settings

    def _settings_owner(self, user_id: str | None, *, operation_label: str) -> str:
        require_capability(self._user_session, Capability.SETTINGS_OWN, operation_label=operation_label)
        acting_user = current_user_id(self._user_session)
        target = user_id or acting_user
        if not target:
            raise AuthenticationRequiredError("Sign in to manage settings.")
        if acting_user is not None and target != acting_user:
            require_capability(
                self._user_session,
                Capability.SETTINGS_WORKSPACE,
                operation_label=f"{operation_label} of another member",
            )
        return target


__all__ = ["UserSettingsMixin"]
