from __future__ import annotations

from core.models import Workspace
from infra.db.models import WorkspaceORM


def workspace_to_orm(workspace: Workspace) -> WorkspaceORM:
    return WorkspaceORM(
        id=workspace.id,
        name=workspace.name,
        currency=workspace.currency,
        timezone=workspace.timezone,
        week_starts_on=workspace.week_starts_on,
        created_at=workspace.created_at,
        updated_at=workspace.updated_at,
    )


def workspace_from_orm(obj: WorkspaceORM) -> Workspace:
    return Workspace(
        id=obj.id,
        name=obj.name,
        currency=obj.currency,
        timezone=obj.timezone,
        week_starts_on=obj.week_starts_on,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )
