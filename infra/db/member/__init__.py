from infra.db.member.mapper import team_from_orm, team_to_orm, user_from_orm, user_to_orm
from infra.db.member.repository import SqlAlchemyTeamRepository, SqlAlchemyUserRepository

__all__ = [
    "user_to_orm",
    "user_from_orm",
    "team_to_orm",
    "team_from_orm",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTeamRepository",
]
