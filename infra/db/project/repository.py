from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import ProjectRepository
from core.models import Project
from infra.db.models import ProjectORM
from infra.db.project.mapper import project_from_orm, project_to_orm


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))

    def update(self, project: Project) -> None:
        self.session.merge(project_to_orm(project))

    def delete(self, project_id: str) -> None:
        self.session.query(ProjectORM).filter_by(id=project_id).delete()

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        return project_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[Project]:
        stmt = select(ProjectORM).where(ProjectORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]

    def list_all(self) -> List[Project]:
        stmt = select(ProjectORM)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyProjectRepository"]
