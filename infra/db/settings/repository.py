from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import UserSettingsRepository
from core.models import UserSettings
from infra.db.models import UserSettingsORM
from infra.db.settings.mapper import user_settings_from_orm, user_settings_to_orm


class SqlAlchemyUserSettingsRepository(UserSettingsRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, settings: UserSettings) -> None:
        self.session.add(user_settings_to_orm(settings))

    def update(self, settings: UserSettings) -> None:
        self.session.merge(user_settings_to_orm(settings))

    def delete(self, settings_id: str) -> None:
        self.session.query(UserSettingsORM).filter_by(id=settings_id).delete()

    def get(self, settings_id: str) -> Optional[UserSettings]:
        obj = self.session.get(UserSettingsORM, settings_id)
        return user_settings_from_orm(obj) if obj else None

    def get_by_user(self, user_id: str) -> Optional[UserSettings]:
        stmt = select(UserSettingsORM).where(UserSettingsORM.user_id == user_id)
        obj = self.session.execute(stmt).scalars().first()
        return user_settings_from_orm(obj) if obj else None

    def list_all(self) -> List[UserSettings]:
        rows = self.session.execute(select(UserSettingsORM)).scalars().all()
        return [user_settings_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyUserSettingsRepository"]
