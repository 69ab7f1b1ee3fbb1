from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import TeamRepository, UserRepository
from core.models import Team, User
from infra.db.member.mapper import team_from_orm, team_to_orm, user_from_orm, user_to_orm
from infra.db.models import TeamORM, UserORM


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, user: User) -> None:
        self.session.add(user_to_orm(user))

    def update(self, user: User) -> None:
        self.session.merge(user_to_orm(user))

    def delete(self, user_id: str) -> None:
        self.session.query(UserORM).filter_by(id=user_id).delete()

    def get(self, user_id: str) -> Optional[User]:
        obj = self.session.get(UserORM, user_id)
        return user_from_orm(obj) if obj else None

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserORM).where(UserORM.email == (email or "").strip().lower())
        obj = self.session.execute(stmt).scalars().first()
        return user_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[User]:
        stmt = select(UserORM).where(UserORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [user_from_orm(row) for row in rows]

    def list_all(self) -> List[User]:
        rows = self.session.execute(select(UserORM)).scalars().all()
        return [user_from_orm(row) for row in rows]


class SqlAlchemyTeamRepository(TeamRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, team: Team) -> None:
        self.session.add(team_to_orm(team))

    def update(self, team: Team) -> None:
        self.session.merge(team_to_orm(team))

    def delete(self, team_id: str) -> None:
        self.session.query(TeamORM).filter_by(id=team_id).delete()

    def get(self, team_id: str) -> Optional[Team]:
        obj = self.session.get(TeamORM, team_id)
        return team_from_orm(obj) if obj else None

    def list_by_workspace(self, workspace_id: str) -> List[Team]:
        stmt = select(TeamORM).where(TeamORM.workspace_id == workspace_id)
        rows = self.session.execute(stmt).scalars().all()
        return [team_from_orm(row) for row in rows]

    def list_all(self) -> List[Team]:
        rows = self.session.execute(select(TeamORM)).scalars().all()
        return [team_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyUserRepository", "SqlAlchemyTeamRepository"]
