from infra.db.workspace.mapper import workspace_from_orm, workspace_to_orm
from infra.db.workspace.repository import SqlAlchemyWorkspaceRepository

__all__ = ["workspace_to_orm", "workspace_from_orm", "SqlAlchemyWorkspaceRepository"]
