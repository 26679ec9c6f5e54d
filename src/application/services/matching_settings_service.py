"""Matching settings service.

Loads and saves the attribute configuration through the settings repository,
falling back to the built-in default configuration whenever nothing usable is
stored.
"""

from attrs import define, fields

from src.config import get_logger
from src.domain.entities import Campaign, Playlist
from src.domain.matching import (
    MatchingConfiguration,
    get_default_matching_configuration,
)
from src.domain.repositories import MatchingSettingsRepositoryProtocol

logger = get_logger(__name__)

# Container fields that are not meaningful as matching sources on their own
_EXCLUDED_FIELDS = frozenset({"metadata"})


@define(frozen=True, slots=True)
class SettingsSaveResult:
    """Outcome of saving the matching configuration."""

    success: bool
    message: str


class MatchingSettingsService:
    """Read/write access to the matching configuration with default fallback."""

    def __init__(self, settings_repo: MatchingSettingsRepositoryProtocol) -> None:
        self.settings_repo = settings_repo

    @staticmethod
    def get_default_matching_settings() -> MatchingConfiguration:
        """Return the built-in seven-attribute configuration."""
        return get_default_matching_configuration()

    async def get_matching_settings(self) -> MatchingConfiguration:
        """Return the stored configuration, or the default.

        The default is used when nothing is stored and when the store fails,
        so a ranking run always has a configuration to work with.
        """
        try:
            stored = await self.settings_repo.get_matching_settings()
        except Exception as e:
            logger.error(f"Error fetching matching settings, using defaults: {e}")
            return self.get_default_matching_settings()

        if stored is None:
            logger.debug("No stored matching settings, using defaults")
            return self.get_default_matching_settings()

        return stored

    async def save_matching_settings(
        self, configuration: MatchingConfiguration
    ) -> SettingsSaveResult:
        """Persist a configuration, reporting success instead of raising."""
        try:
            await self.settings_repo.save_matching_settings(configuration)
        except Exception as e:
            logger.error(f"Error saving matching settings: {e}")
            return SettingsSaveResult(
                success=False, message="Failed to save matching settings"
            )

        logger.info(
            f"Saved matching settings with {len(configuration.attributes)} attributes"
        )
        return SettingsSaveResult(
            success=True, message="Matching settings saved successfully"
        )

    async def reset_matching_settings(self) -> SettingsSaveResult:
        """Drop the stored configuration so the defaults apply again."""
        try:
            await self.settings_repo.clear_matching_settings()
        except Exception as e:
            logger.error(f"Error resetting matching settings: {e}")
            return SettingsSaveResult(
                success=False, message="Failed to reset matching settings"
            )

        return SettingsSaveResult(
            success=True, message="Matching settings reset to defaults"
        )

    @staticmethod
    def get_campaign_fields() -> list[str]:
        """Field paths a campaign offers as attribute sources."""
        return [f.name for f in fields(Campaign) if f.name not in _EXCLUDED_FIELDS]

    @staticmethod
    def get_playlist_fields() -> list[str]:
        """Field paths a playlist offers as attribute sources."""
        return [f.name for f in fields(Playlist) if f.name not in _EXCLUDED_FIELDS]
