from infra.db.settings.mapper import user_settings_from_orm, user_settings_to_orm
from infra.db.settings.repository import SqlAlchemyUserSettingsRepository

__all__ = ["user_settings_to_orm", "user_settings_from_orm", "SqlAlchemyUserSettingsRepository"]
