from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError
from core.interfaces import ClientRepository, ProjectRepository
from core.models import EstimateType, Project, utc_now
from core.services.auth.authorization import require_capability
from core.services.auth.policy import Capability
from core.services.project.validation import ProjectValidationMixin

logger = logging.getLogger(__name__)
DEFAULT_PROJECT_COLOR = "#3B82F6"


class ProjectLifecycleMixin(ProjectValidationMixin):
    _session: Session
    _project_repo: ProjectRepository
    _client_repo: ClientRepository

    def create_project(
        self,
        workspace_id: str,
        name: str,
        color: str = DEFAULT_PROJECT_COLOR,
        client_id: str | None = None,
        billable_by_default: bool = False,
        billable_rate: float | None = None,
        estimate_type: EstimateType = EstimateType.NONE,
        estimate_value: float | None = None,
        is_public: bool = True,
        assigned_member_ids: Iterable[str] | None = None,
    ) -> Project:
        require_capability(self._user_session, Capability.PROJECTS_WRITE, operation_label="create project")
        clean_name = self._validate_project_name(workspace_id, name)
        self._require_client(client_id)
        project = Project.create(
            workspace_id=workspace_id,
            name=clean_name,
            color=self._validate_color(color, code_prefix="PROJECT"),
            client_id=client_id,
            billable_by_default=bool(billable_by_default),
            billable_rate=self._validate_non_negative(billable_rate, label="Billable rate"),
            estimate_type=estimate_type,
            estimate_value=self._validate_non_negative(estimate_value, label="Estimate"),
            is_public=bool(is_public),
            assigned_member_ids=list(dict.fromkeys(assigned_member_ids or [])),
        )

        try:
            self._project_repo.add(project)
            self._session.commit()
            logger.info("Created project %s - %s", project.id, project.name)
            domain_events.projects_changed.emit(project.id)
            return project
        except Exception as e:
            self._session.rollback()
            logger.error("Error creating project: %s", e)
            raise

    def update_project(
        self,
        project_id: str,
        name: str | None = None,
        color: str | None = None,
        client_id: str | None = None,
        billable_by_default: bool | None = None,
        billable_rate: float | None = None,
        is_public: bool | None = None,
        active: bool | None = None,
    ) -> Project:
        require_capability(self._user_session, Capability.PROJECTS_WRITE, operation_label="update project")
        project = self._require_project(project_id)

        if name is not None:
            project.name = self._validate_project_name(project.workspace_id, name, ignore_id=project.id)
        if color is not None:
            project.color = self._validate_color(color, code_prefix="PROJECT")
        if client_id is not None:
            self._require_client(client_id or None)
            project.client_id = client_id or None
        if billable_by_default is not None:
            project.billable_by_default = bool(billable_by_default)
        if billable_rate is not None:
            project.billable_rate = self._validate_non_negative(billable_rate, label="Billable rate")
        if is_public is not None:
            project.is_public = bool(is_public)
        if active is not None:
            project.active = bool(active)
        project.updated_at = utc_now()

        try:
            self._project_repo.update(project)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise

        domain_events.projects_changed.emit(project_id)
        return project

    def assign_members(self, project_id: str, member_ids: Iterable[str]) -> Project:
        require_capability(
            self._user_session,
            Capability.PROJECTS_MANAGE_MEMBERS,
            operation_label="assign project members",
        )
        project = self._require_project(project_id)
        project.assigned_member_ids = list(dict.fromkeys(member_ids))
        project.updated_at = utc_now()
        try:
            self._project_repo.update(project)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info("Project %s now has %d assigned member(s)", project.id, len(project.assigned_member_ids))
        domain_events.projects_changed.emit(project_id)
        return project

    def delete_project(self, project_id: str) -> None:
        """Delete a project. Entries keep their (now dangling) project reference."""
        require_capability(self._user_session, Capability.PROJECTS_DELETE, operation_label="delete project")
        self._require_project(project_id)
        try:
            self._project_repo.delete(project_id)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.info("Deleted project %s", project_id)
        domain_events.projects_changed.emit(project_id)

    def _require_project(self, project_id: str) -> Project:
        project = self._project_repo.get(project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        return project

    def _require_client(self, client_id: str | None) -> None:
        if client_id is None:
            return
        if self._client_repo.get(client_id) is None:
            raise NotFoundError("Client not found.", code="CLIENT_NOT_FOUND")


__all__ = ["ProjectLifecycleMixin", "DEFAULT_PROJECT_COLOR"]
