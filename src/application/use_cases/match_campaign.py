"""Match campaign use case: rank the playlist catalog for one campaign.

Wraps the pure ranking pipeline with configuration loading, so callers that
do not carry a configuration get the stored settings (or the defaults).
"""

from attrs import define, field

from src.application.services.matching_settings_service import (
    MatchingSettingsService,
)
from src.config import get_logger
from src.domain.entities import Campaign, Playlist
from src.domain.matching import MatchingConfiguration, MatchResult, rank_playlists
from src.domain.repositories import UnitOfWorkProtocol

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class MatchCampaignCommand:
    """Command for ranking a catalog against one campaign."""

    campaign: Campaign
    playlists: list[Playlist] = field(factory=list)
    configuration: MatchingConfiguration | None = None


async def resolve_configuration(
    configuration: MatchingConfiguration | None,
    uow: UnitOfWorkProtocol,
) -> MatchingConfiguration:
    """Use the given configuration, or load it from the settings store."""
    if configuration is not None:
        return configuration
    service = MatchingSettingsService(uow.get_matching_settings_repository())
    return await service.get_matching_settings()


@define(slots=True)
class MatchCampaignUseCase:
    """Rank every playlist in the catalog against a campaign.

    Scoring is pure and synchronous; the only I/O is loading the
    configuration when the command does not supply one.
    """

    async def execute(
        self,
        command: MatchCampaignCommand,
        uow: UnitOfWorkProtocol,
    ) -> list[MatchResult]:
        """Execute ranking.

        Returns:
            Match results sorted by score, highest first
        """
        configuration = await resolve_configuration(command.configuration, uow)

        results = rank_playlists(command.campaign, command.playlists, configuration)

        logger.debug(
            f"Ranked {len(results)} playlists for campaign "
            f"{command.campaign.campaign_id}"
        )
        return results
