from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import AuthenticationRequiredError, NotFoundError
from core.interfaces import (
    CategoryRepository,
    ProjectRepository,
    TagRepository,
    TimeEntryRepository,
    UserSettingsRepository,
)
from core.models import DEFAULT_DURATION_MINUTES, DEFAULT_START_TIME, TimeEntry, utc_now
from core.services.auth.authorization import current_user_id, require_capability
from core.services.auth.policy import Capability
from core.services.common.durations import interval_minutes, minutes_to_hhmm, parse_hhmm
from core.services.common.weeks import week_start
from core.services.time_entry.validation import TimeEntryValidationMixin, validate_time_entry_fields

logger = logging.getLogger(__name__)


class TimeEntryLifecycleMixin(TimeEntryValidationMixin):
    _session: Session
    _entry_repo: TimeEntryRepository
    _project_repo: ProjectRepository
    _tag_repo: TagRepository
    _category_repo: CategoryRepository | None
    _settings_repo: UserSettingsRepository | None

    def create_entry(
        self,
        description: str,
        date: str,
        start_time: str | None = None,
        end_time: str | None = None,
        duration_minutes: int | None = None,
        project_id: str | None = None,
        tag_ids: Iterable[str] | None = None,
        billable: bool | None = None,
        user_id: str | None = None,
        workspace_id: str | None = None,
        category_id: str | None = None,
    ) -> TimeEntry:
        """Create an entry; a missing start or end falls back to the owner's settings."""
        owner_id = user_id or current_user_id(self._user_session) or ""
        self._require_write_access(owner_id, operation_label="create time entry")
        workspace_id = workspace_id or self._current_workspace_id()

        if start_time is None or end_time is None:
            default_start, default_duration = self._entry_defaults(owner_id)
            if start_time is None:
                start_time = default_start
            if end_time is None:
                length = duration_minutes if duration_minutes is not None else default_duration
                start = parse_hhmm(start_time)
                end_time = minutes_to_hhmm(start + int(length)) if start is not None else ""
                duration_minutes = int(length)
        if duration_minutes is None:
            duration_minutes = interval_minutes(start_time, end_time)
        project = self._require_project(project_id)
        resolved_tags = self._require_tags(tag_ids or [])
        self._require_category(category_id)
        if billable is None:
            billable = bool(project.billable_by_default) if project is not None else False

        entry = TimeEntry.create(
            workspace_id=workspace_id,
            user_id=owner_id,
            description=(description or "").strip(),
            date=(date or "").strip(),
            start_time=(start_time or "").strip(),
            end_time=(end_time or "").strip(),
            duration_minutes=duration_minutes,
            project_id=project_id,
            tag_ids=resolved_tags,
            billable=bool(billable),
            category_id=category_id or None,
        )
        self._validate_entry(entry)

        try:
            self._entry_repo.add(entry)
            self._session.commit()
            logger.info("Created time entry %s (%d min) for %s", entry.id, entry.duration_minutes, entry.user_id)
            domain_events.time_entries_changed.emit(entry.workspace_id)
            return entry
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating time entry: %s", e)
            raise

    def update_entry(
        self,
        entry_id: str,
        description: str | None = None,
        date: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        duration_minutes: int | None = None,
        project_id: str | None = None,
        tag_ids: Iterable[str] | None = None,
        billable: bool | None = None,
        category_id: str | None = None,
    ) -> TimeEntry:
        entry = self._require_entry(entry_id)
        self._require_write_access(entry.user_id, operation_label="update time entry")

        if description is not None:
            entry.description = description.strip()
        if date is not None:
            entry.date = date.strip()
        times_changed = start_time is not None or end_time is not None
        if start_time is not None:
            entry.start_time = start_time.strip()
        if end_time is not None:
            entry.end_time = end_time.strip()
        if duration_minutes is not None:
            entry.duration_minutes = duration_minutes
        elif times_changed:
            entry.duration_minutes = interval_minutes(entry.start_time, entry.end_time)
        if project_id is not None:
            self._require_project(project_id or None)
            entry.project_id = project_id or None
        if tag_ids is not None:
            entry.tag_ids = self._require_tags(tag_ids)
        if billable is not None:
            entry.billable = bool(billable)
        if category_id is not None:
            self._require_category(category_id or None)
            entry.category_id = category_id or None
        self._validate_entry(entry)
        entry.updated_at = utc_now()

        try:
            self._entry_repo.update(entry)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        domain_events.time_entries_changed.emit(entry.workspace_id)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        entry = self._require_entry(entry_id)
        self._require_write_access(entry.user_id, operation_label="delete time entry")
        try:
            self._entry_repo.delete(entry_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info("Deleted time entry %s", entry_id)
        domain_events.time_entries_changed.emit(entry.workspace_id)

    def duplicate_entry(self, entry_id: str) -> TimeEntry:
        source = self._require_entry(entry_id)
        return self.create_entry(
            description=source.description,
            date=source.date,
            start_time=source.start_time,
            end_time=source.end_time,
            duration_minutes=source.duration_minutes,
            project_id=source.project_id,
            tag_ids=list(source.tag_ids),
            billable=source.billable,
            user_id=source.user_id,
            workspace_id=source.workspace_id,
            category_id=source.category_id,
        )

    def add_timesheet_time(self, project_id: str, day: str, minutes: int) -> TimeEntry:
        """Log a block of time from a timesheet cell at the member's default start time."""
        project = self._require_project(project_id)
        start_time, _ = self._entry_defaults(current_user_id(self._user_session) or "")
        return self.create_entry(
            description=project.name,
            date=day,
            start_time=start_time,
            duration_minutes=int(minutes),
            project_id=project_id,
            billable=project.billable_by_default,
        )

    def copy_previous_week(self, any_day: date, week_starts_on: int = 0) -> List[TimeEntry]:
        """Copy the member's own entries from the week before ``any_day`` one week forward."""
        require_capability(
            self._user_session,
            Capability.TIME_ENTRIES_OWN_WRITE,
            operation_label="copy previous week",
        )
        user_id = current_user_id(self._user_session)
        if user_id is None:
            raise AuthenticationRequiredError("Sign in to copy entries.")
        first_day = week_start(any_day, week_starts_on)
        previous_start = (first_day - timedelta(days=7)).isoformat()
        previous_end = (first_day - timedelta(days=1)).isoformat()

        sources = [
            entry
            for entry in self._entry_repo.list_in_range(
                self._current_workspace_id(), previous_start, previous_end
            )
            if entry.user_id == user_id
        ]
        copies = [
            TimeEntry.create(
                workspace_id=entry.workspace_id,
                user_id=user_id,
                description=entry.description,
                date=(date.fromisoformat(entry.date) + timedelta(days=7)).isoformat(),
                start_time=entry.start_time,
                end_time=entry.end_time,
                duration_minutes=entry.duration_minutes,
                project_id=entry.project_id,
                tag_ids=list(entry.tag_ids),
                billable=entry.billable,
                category_id=entry.category_id,
            )
            for entry in sources
        ]
        if not copies:
            return []
        try:
            self._entry_repo.add_many(copies)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info("Copied %d entr(ies) from week starting %s", len(copies), previous_start)
        domain_events.time_entries_changed.emit(copies[0].workspace_id)
        return copies

    def _validate_entry(self, entry: TimeEntry) -> None:
        self._raise_on_issues(
            validate_time_entry_fields(
                workspace_id=entry.workspace_id,
                user_id=entry.user_id,
                description=entry.description,
                date=entry.date,
                start_time=entry.start_time,
                end_time=entry.end_time,
                duration_minutes=entry.duration_minutes,
            )
        )

    def _require_write_access(self, owner_id: str, *, operation_label: str) -> None:
        require_capability(self._user_session, Capability.TIME_ENTRIES_OWN_WRITE, operation_label=operation_label)
        acting_user = current_user_id(self._user_session)
        if acting_user is not None and owner_id != acting_user:
            require_capability(
                self._user_session,
                Capability.TIME_ENTRIES_ALL_WRITE,
                operation_label=f"{operation_label} of another member",
            )

    def _require_entry(self, entry_id: str) -> TimeEntry:
        entry = self._entry_repo.get(entry_id)
        if not entry:
            raise NotFoundError("Time entry not found.", code="TIME_ENTRY_NOT_FOUND")
        return entry

    def _require_project(self, project_id: str | None):
        if not project_id:
            return None
        project = self._project_repo.get(project_id)
        if project is None:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        return project

    def _require_category(self, category_id: str | None) -> None:
        if not category_id or self._category_repo is None:
            return
        if self._category_repo.get(category_id) is None:
            raise NotFoundError("Category not found.", code="CATEGORY_NOT_FOUND")

    def _entry_defaults(self, user_id: str) -> tuple[str, int]:
        settings = None
        if self._settings_repo is not None and user_id:
            settings = self._settings_repo.get_by_user(user_id)
        if settings is None:
            return DEFAULT_START_TIME, DEFAULT_DURATION_MINUTES
        return settings.default_start_time, settings.default_duration_minutes

    def _require_tags(self, tag_ids: Iterable[str]) -> List[str]:
        resolved: List[str] = []
        for tag_id in tag_ids:
            if self._tag_repo.get(tag_id) is None:
                raise NotFoundError(f"Tag not found: {tag_id}", code="TAG_NOT_FOUND")
            resolved.append(tag_id)
        return resolved


__all__ = ["TimeEntryLifecycleMixin"]
