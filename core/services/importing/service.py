from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import AuthenticationRequiredError, BusinessRuleError
from core.interfaces import ProjectRepository, TagRepository, TimeEntryRepository
from core.models import TimeEntry
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.auth.session import UserSessionContext
from core.services.importing.columns import HEADER_ROW
from core.services.importing.csv_parser import parse_csv
from core.services.importing.models import (
    CsvStatus,
    ImportPreview,
    ImportRowError,
    ImportSummary,
    ImportValidationResult,
)
from core.services.importing.validator import validate_headers, validate_import
from core.services.project.visibility import filter_visible_projects

logger = logging.getLogger(__name__)

FILE_FIELD = "File"


class ImportService:
    """Runs the CSV import for the signed-in member: preview first, then one bulk write."""

    def __init__(
        self,
        session: Session,
        project_repo: ProjectRepository,
        tag_repo: TagRepository,
        entry_repo: TimeEntryRepository,
        user_session: UserSessionContext | None = None,
    ):
        self._session: Session = session
        self._project_repo: ProjectRepository = project_repo
        self._tag_repo: TagRepository = tag_repo
        self._entry_repo: TimeEntryRepository = entry_repo
        self._user_session: UserSessionContext | None = user_session

    def preview(self, text: str) -> ImportPreview:
        user_id, workspace_id = self._require_identity()
        parsed = parse_csv(text)

        if parsed.status == CsvStatus.EMPTY:
            return ImportPreview(
                status=CsvStatus.EMPTY,
                result=_rejected(ImportRowError(HEADER_ROW, FILE_FIELD, "The file is empty.")),
            )

        header_errors = validate_headers(parsed.headers)
        if header_errors:
            logger.info("Import rejected: %d missing column(s)", len(header_errors))
            return ImportPreview(status=parsed.status, result=_rejected(*header_errors))

        if parsed.status == CsvStatus.HEADER_ONLY:
            return ImportPreview(
                status=CsvStatus.HEADER_ONLY,
                result=_rejected(
                    ImportRowError(HEADER_ROW, FILE_FIELD, "The file has a header but no data rows.")
                ),
            )

        projects = filter_visible_projects(
            self._project_repo.list_by_workspace(workspace_id),
            self._user_session,
        )
        tags = self._tag_repo.list_by_workspace(workspace_id)
        result = validate_import(parsed.rows, projects, tags, user_id, workspace_id)
        logger.info(
            "Import preview: %d row(s), %d error(s), %d minute(s)",
            result.summary.total_entries,
            len(result.errors),
            result.summary.total_minutes,
        )
        return ImportPreview(status=CsvStatus.OK, result=result)

    def commit(self, result: ImportValidationResult) -> List[TimeEntry]:
        require_capability(
            self._user_session,
            Capability.TIME_ENTRIES_OWN_WRITE,
            operation_label="import time entries",
        )
        if not result.valid or not result.entries:
            raise BusinessRuleError(
                "Only a fully valid import can be saved.",
                code="IMPORT_INVALID",
            )
        user_id, _ = self._require_identity()
        if any(entry.user_id != user_id for entry in result.entries):
            require_capability(
                self._user_session,
                Capability.TIME_ENTRIES_ALL_WRITE,
                operation_label="import time entries for other members",
            )

        created = [
            TimeEntry.create(
                workspace_id=entry.workspace_id,
                user_id=entry.user_id,
                description=entry.description,
                date=entry.date,
                start_time=entry.start_time,
                end_time=entry.end_time,
                duration_minutes=entry.duration_minutes,
                project_id=entry.project_id,
                tag_ids=entry.tag_ids,
                billable=entry.billable,
            )
            for entry in result.entries
        ]
        try:
            self._entry_repo.add_many(created)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            logger.error("Error importing time entries: %s", e)
            raise
        logger.info("Imported %d time entr(ies)", len(created))
        domain_events.time_entries_changed.emit(created[0].workspace_id)
        return created

    def import_text(self, text: str) -> tuple[ImportPreview, List[TimeEntry]]:
        preview = self.preview(text)
        if not preview.valid:
            return preview, []
        return preview, self.commit(preview.result)

    def _require_identity(self) -> tuple[str, str]:
        principal = self._user_session.principal if self._user_session is not None else None
        if principal is None:
            raise AuthenticationRequiredError("Sign in to import time entries.")
        return principal.user_id, principal.workspace_id


def _rejected(*errors: ImportRowError) -> ImportValidationResult:
    return ImportValidationResult(
        valid=False,
        entries=[],
        errors=list(errors),
        summary=ImportSummary(),
    )


__all__ = ["ImportService"]
