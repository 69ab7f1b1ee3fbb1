from core.services.settings.service import SettingsService

__all__ = ["SettingsService"]
