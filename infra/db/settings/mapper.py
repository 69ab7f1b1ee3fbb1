from __future__ import annotations

from core.models import UserSettings
from infra.db.models import UserSettingsORM


def user_settings_to_orm(settings: UserSettings) -> UserSettingsORM:
    return UserSettingsORM(
        id=settings.id,
        user_id=settings.user_id,
        default_project_id=settings.default_project_id,
        default_tag_ids=list(settings.default_tag_ids),
        default_duration_minutes=settings.default_duration_minutes,
        default_start_time=settings.default_start_time,
        theme=settings.theme,
    )


def user_settings_from_orm(obj: UserSettingsORM) -> UserSettings:
    return UserSettings(
        id=obj.id,
        user_id=obj.user_id,
        default_project_id=obj.default_project_id,
        default_tag_ids=list(obj.default_tag_ids or []),
        default_duration_minutes=obj.default_duration_minutes,
        default_start_time=obj.default_start_time,
        theme=obj.theme,
    )
