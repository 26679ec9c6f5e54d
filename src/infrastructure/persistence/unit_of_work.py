"""Database Unit of Work implementation for transaction boundary management.

Provides the concrete UnitOfWork, handing out repositories that share one
database session.
"""

from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.repositories.interfaces import (
    CampaignRepositoryProtocol,
    MatchingSettingsRepositoryProtocol,
    PitchRepositoryProtocol,
    PlaylistRepositoryProtocol,
)
from src.infrastructure.persistence.repositories.campaign import CampaignRepository
from src.infrastructure.persistence.repositories.matching_settings import (
    MatchingSettingsRepository,
)
from src.infrastructure.persistence.repositories.pitch import PitchRepository
from src.infrastructure.persistence.repositories.playlist import PlaylistRepository


class DatabaseUnitOfWork:
    """Database implementation of the Unit of Work pattern.

    Commits on successful exit and rolls back on exceptions, unless the caller
    already committed explicitly. The same instance may be entered more than
    once; each entry is its own transaction boundary.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._committed = False

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        self._committed = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context manager with automatic commit/rollback."""
        if exc_type is not None:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        await self._session.commit()
        self._committed = True

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self._session.rollback()

    def get_matching_settings_repository(self) -> MatchingSettingsRepositoryProtocol:
        """Get matching settings repository using this unit of work's transaction."""
        return MatchingSettingsRepository(self._session)

    def get_campaign_repository(self) -> CampaignRepositoryProtocol:
        """Get campaign repository using this unit of work's transaction."""
        return CampaignRepository(self._session)

    def get_playlist_repository(self) -> PlaylistRepositoryProtocol:
        """Get playlist repository using this unit of work's transaction."""
        return PlaylistRepository(self._session)

    def get_pitch_repository(self) -> PitchRepositoryProtocol:
        """Get pitch repository using this unit of work's transaction."""
        return PitchRepository(self._session)
