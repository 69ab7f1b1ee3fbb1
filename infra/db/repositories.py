# infra/db/repositories.py
from infra.db.catalog.repository import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyTagRepository,
)
from infra.db.member.repository import SqlAlchemyTeamRepository, SqlAlchemyUserRepository
from infra.db.project.repository import SqlAlchemyProjectRepository
from infra.db.settings.repository import SqlAlchemyUserSettingsRepository
from infra.db.time_entry.repository import SqlAlchemyTimeEntryRepository
from infra.db.workspace.repository import SqlAlchemyWorkspaceRepository

__all__ = [
    "SqlAlchemyWorkspaceRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTeamRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyTagRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyTimeEntryRepository",
    "SqlAlchemyUserSettingsRepository",
]
