from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from core.services.auth import AuthService
from core.services.auth.session import UserSessionContext
from core.services.catalog import CategoryService, ClientService, TagService
from core.services.importing import ImportService
from core.services.member import MemberService
from core.services.project import ProjectService
from core.services.reporting import ReportingService
from core.services.settings import SettingsService
from core.services.time_entry import TimeEntryService
from infra.db.repositories import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyTagRepository,
    SqlAlchemyTeamRepository,
    SqlAlchemyTimeEntryRepository,
    SqlAlchemyUserRepository,
    SqlAlchemyUserSettingsRepository,
    SqlAlchemyWorkspaceRepository,
)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    user_session: UserSessionContext
    auth_service: AuthService
    member_service: MemberService
    project_service: ProjectService
    client_service: ClientService
    tag_service: TagService
    category_service: CategoryService
    time_entry_service: TimeEntryService
    import_service: ImportService
    reporting_service: ReportingService
    settings_service: SettingsService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "user_session": self.user_session,
            "auth_service": self.auth_service,
            "member_service": self.member_service,
            "project_service": self.project_service,
            "client_service": self.client_service,
            "tag_service": self.tag_service,
            "category_service": self.category_service,
            "time_entry_service": self.time_entry_service,
            "import_service": self.import_service,
            "reporting_service": self.reporting_service,
            "settings_service": self.settings_service,
        }


def build_service_graph(session: Session, *, bootstrap: bool = True) -> ServiceGraph:
    user_session = UserSessionContext()
    workspace_repo = SqlAlchemyWorkspaceRepository(session)
    user_repo = SqlAlchemyUserRepository(session)
    team_repo = SqlAlchemyTeamRepository(session)
    client_repo = SqlAlchemyClientRepository(session)
    tag_repo = SqlAlchemyTagRepository(session)
    project_repo = SqlAlchemyProjectRepository(session)
    entry_repo = SqlAlchemyTimeEntryRepository(session)
    category_repo = SqlAlchemyCategoryRepository(session)
    settings_repo = SqlAlchemyUserSettingsRepository(session)

    auth_service = AuthService(user_repo=user_repo, user_session=user_session)
    member_service = MemberService(
        session,
        workspace_repo,
        user_repo,
        team_repo,
        user_session=user_session,
    )
    if bootstrap:
        member_service.bootstrap_defaults()

    project_service = ProjectService(
        session,
        project_repo,
        client_repo,
        user_session=user_session,
    )
    client_service = ClientService(
        session,
        client_repo,
        project_repo,
        user_session=user_session,
    )
    tag_service = TagService(session, tag_repo, user_session=user_session)
    category_service = CategoryService(session, category_repo, entry_repo, user_session=user_session)
    time_entry_service = TimeEntryService(
        session,
        entry_repo,
        project_repo,
        tag_repo,
        user_session=user_session,
        category_repo=category_repo,
        settings_repo=settings_repo,
    )
    import_service = ImportService(
        session,
        project_repo,
        tag_repo,
        entry_repo,
        user_session=user_session,
    )
    reporting_service = ReportingService(
        entry_repo=entry_repo,
        project_repo=project_repo,
        client_repo=client_repo,
        user_repo=user_repo,
        team_repo=team_repo,
        tag_repo=tag_repo,
        user_session=user_session,
    )
    settings_service = SettingsService(
        session,
        workspace_repo,
        settings_repo,
        project_repo,
        tag_repo,
        user_session=user_session,
    )

    return ServiceGraph(
        session=session,
        user_session=user_session,
        auth_service=auth_service,
        member_service=member_service,
        project_service=project_service,
        client_service=client_service,
        tag_service=tag_service,
        category_service=category_service,
        time_entry_service=time_entry_service,
        import_service=import_service,
        reporting_service=reporting_service,
        settings_service=settings_service,
    )
