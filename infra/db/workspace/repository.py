from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import WorkspaceRepository
from core.models import Workspace
from infra.db.models import WorkspaceORM
from infra.db.workspace.mapper import workspace_from_orm, workspace_to_orm


class SqlAlchemyWorkspaceRepository(WorkspaceRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, workspace: Workspace) -> None:
        self.session.add(workspace_to_orm(workspace))

    def update(self, workspace: Workspace) -> None:
        self.session.merge(workspace_to_orm(workspace))

    def delete(self, workspace_id: str) -> None:
        self.session.query(WorkspaceORM).filter_by(id=workspace_id).delete()

    def get(self, workspace_id: str) -> Optional[Workspace]:
        obj = self.session.get(WorkspaceORM, workspace_id)
        return workspace_from_orm(obj) if obj else None

    def list_all(self) -> List[Workspace]:
        stmt = select(WorkspaceORM).order_by(WorkspaceORM.created_at)
        rows = self.session.execute(stmt).scalars().all()
        return [workspace_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyWorkspaceRepository"]
