from __future__ import annotations

from typing import List

from core.interfaces import ProjectRepository
from core.models import Project
from core.services.auth.session import UserSessionContext
from core.services.project.visibility import filter_visible_projects


class ProjectQueryMixin:
    _project_repo: ProjectRepository
    _user_session: UserSessionContext | None

    def list_projects(self, workspace_id: str, *, include_archived: bool = True) -> List[Project]:
        projects = filter_visible_projects(
            self._project_repo.list_by_workspace(workspace_id),
            self._user_session,
        )
        if not include_archived:
            projects = [project for project in projects if project.active]
        return sorted(projects, key=lambda project: project.name.casefold())

    def get_project(self, project_id: str) -> Project | None:
        return self._project_repo.get(project_id)

    def search_projects_by_name(self, workspace_id: str, query: str) -> List[Project]:
        normalized = query.strip().lower()
        return [
            project
            for project in self.list_projects(workspace_id)
            if normalized in project.name.lower()
        ]


__all__ = ["ProjectQueryMixin"]
