from __future__ import annotations

from core.models import Team, User
from infra.db.models import TeamORM, UserORM


def user_to_orm(user: User) -> UserORM:
    return UserORM(
        id=user.id,
        workspace_id=user.workspace_id,
        name=user.name,
        email=user.email,
        role=user.role,
        team_ids=list(user.team_ids),
        avatar_url=user.avatar_url,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def user_from_orm(obj: UserORM) -> User:
    return User(
        id=obj.id,
        workspace_id=obj.workspace_id,
        name=obj.name,
        email=obj.email,
        role=obj.role,
        team_ids=list(obj.team_ids or []),
        avatar_url=obj.avatar_url,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


def team_to_orm(team: Team) -> TeamORM:
    return TeamORM(
        id=team.id,
        workspace_id=team.workspace_id,
        name=team.name,
        created_at=team.created_at,
        updated_at=team.updated_at,
    )


def team_from_orm(obj: TeamORM) -> Team:
    return Team(
        id=obj.id,
        workspace_id=obj.workspace_id,
        name=obj.name,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )
