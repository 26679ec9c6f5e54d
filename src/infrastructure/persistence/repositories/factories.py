"""Repository factory functions.

These keep session-aware repository creation in the infrastructure layer.
Application use cases depend only on domain protocols, not on these factories.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.repositories.interfaces import (
    CampaignRepositoryProtocol,
    MatchingSettingsRepositoryProtocol,
    PitchRepositoryProtocol,
    PlaylistRepositoryProtocol,
    UnitOfWorkProtocol,
)
from src.infrastructure.persistence.repositories.campaign import CampaignRepository
from src.infrastructure.persistence.repositories.matching_settings import (
    MatchingSettingsRepository,
)
from src.infrastructure.persistence.repositories.pitch import PitchRepository
from src.infrastructure.persistence.repositories.playlist import PlaylistRepository
from src.infrastructure.persistence.unit_of_work import DatabaseUnitOfWork


def get_matching_settings_repository(
    session: AsyncSession,
) -> MatchingSettingsRepositoryProtocol:
    """Get matching settings repository with session management."""
    return MatchingSettingsRepository(session)


def get_campaign_repository(session: AsyncSession) -> CampaignRepositoryProtocol:
    """Get campaign repository with session management."""
    return CampaignRepository(session)


def get_playlist_repository(session: AsyncSession) -> PlaylistRepositoryProtocol:
    """Get playlist repository with session management."""
    return PlaylistRepository(session)


def get_pitch_repository(session: AsyncSession) -> PitchRepositoryProtocol:
    """Get pitch repository with session management."""
    return PitchRepository(session)


def get_unit_of_work(session: AsyncSession) -> UnitOfWorkProtocol:
    """Get unit of work for transaction boundary management."""
    return DatabaseUnitOfWork(session)
