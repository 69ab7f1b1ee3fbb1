from __future__ import annotations

from core.models import Project
from infra.db.models import ProjectORM


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        workspace_id=project.workspace_id,
        name=project.name,
        color=project.color,
        client_id=project.client_id,
        billable_by_default=project.billable_by_default,
        billable_rate=project.billable_rate,
        estimate_type=project.estimate_type,
        estimate_value=project.estimate_value,
        active=project.active,
        is_public=project.is_public,
        assigned_member_ids=list(project.assigned_member_ids),
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        workspace_id=obj.workspace_id,
        name=obj.name,
        color=obj.color,
        client_id=obj.client_id,
        billable_by_default=obj.billable_by_default,
        billable_rate=obj.billable_rate,
        estimate_type=obj.estimate_type,
        estimate_value=obj.estimate_value,
        active=obj.active,
        is_public=obj.is_public,
        assigned_member_ids=list(obj.assigned_member_ids or []),
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )
