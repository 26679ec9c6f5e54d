"""Create campaign use case with automatic matching.

Saving a campaign that requests pitches immediately runs auto-matching
against the current catalog, so the new campaign starts with its pitches.
"""

from attrs import define

from src.config import get_logger
from src.domain.entities import Campaign
from src.domain.repositories import UnitOfWorkProtocol

from .auto_match_campaign import (
    AutoMatchCampaignCommand,
    AutoMatchCampaignUseCase,
    AutoMatchResult,
)

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class CreateCampaignResult:
    """Outcome of campaign creation and the optional auto-match run."""

    success: bool
    message: str
    campaign: Campaign | None = None
    auto_match: AutoMatchResult | None = None


@define(slots=True)
class CreateCampaignUseCase:
    """Persist a campaign, then auto-match it when it requests pitches."""

    async def execute(
        self,
        campaign: Campaign,
        uow: UnitOfWorkProtocol,
    ) -> CreateCampaignResult:
        try:
            async with uow:
                saved = await uow.get_campaign_repository().save_campaign(campaign)
                if not saved:
                    return CreateCampaignResult(
                        success=False, message="Failed to create campaign"
                    )

                playlists = []
                if saved.pitches > 0:
                    playlists = await uow.get_playlist_repository().list_playlists()
        except Exception as e:
            logger.exception(f"Error creating campaign: {e}")
            return CreateCampaignResult(
                success=False,
                message="An error occurred while creating the campaign",
            )

        auto_match = None
        if playlists:
            # Campaign is committed above; auto-match runs in its own transaction
            auto_match = await AutoMatchCampaignUseCase().execute(
                AutoMatchCampaignCommand(campaign=saved, playlists=playlists), uow
            )
            logger.info(f"Auto-matching result: {auto_match.message}")

        return CreateCampaignResult(
            success=True,
            message="Campaign created successfully",
            campaign=saved,
            auto_match=auto_match,
        )
