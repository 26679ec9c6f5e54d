"""Application services - configuration access shared by the use cases."""

from .matching_settings_service import MatchingSettingsService, SettingsSaveResult

__all__ = [
    "MatchingSettingsService",
    "SettingsSaveResult",
]
