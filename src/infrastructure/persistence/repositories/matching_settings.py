"""Matching settings repository.

The configuration lives in a single row keyed by `MATCHING_SETTINGS_KEY`,
stored in the same JSON wire shape the settings screens exchange.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_logger
from src.domain.matching import MatchingConfiguration
from src.infrastructure.persistence.database.db_models import DBMatchingSettings
from src.infrastructure.persistence.repositories.repo_decorator import db_operation

logger = get_logger(__name__)

MATCHING_SETTINGS_KEY = "matching:settings"


class MatchingSettingsRepository:
    """Repository for the stored matching configuration."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _get_row(self) -> DBMatchingSettings | None:
        result = await self.session.execute(
            DBMatchingSettings.active_records().where(
                DBMatchingSettings.settings_key == MATCHING_SETTINGS_KEY
            )
        )
        return result.scalars().first()

    @db_operation("get_matching_settings")
    async def get_matching_settings(self) -> MatchingConfiguration | None:
        """Get the stored configuration, or None when nothing has been saved.

        Raises:
            ValueError: If the stored payload cannot be parsed
        """
        row = await self._get_row()
        if row is None:
            return None
        return MatchingConfiguration.from_dict(row.payload)

    @db_operation("save_matching_settings")
    async def save_matching_settings(
        self, configuration: MatchingConfiguration
    ) -> MatchingConfiguration:
        """Replace the stored configuration."""
        payload = configuration.to_dict()
        row = await self._get_row()

        if row is None:
            self.session.add(
                DBMatchingSettings(settings_key=MATCHING_SETTINGS_KEY, payload=payload)
            )
        else:
            row.payload = payload

        await self.session.flush()
        return configuration

    @db_operation("clear_matching_settings")
    async def clear_matching_settings(self) -> None:
        """Remove the stored configuration so the defaults apply again."""
        row = await self._get_row()
        if row is not None:
            row.mark_soft_deleted()
            row.settings_key = f"{MATCHING_SETTINGS_KEY}:deleted:{row.id}"
            await self.session.flush()
            logger.info("Cleared stored matching settings")
