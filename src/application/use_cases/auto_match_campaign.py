"""Auto-match use case: turn a campaign's top-ranked playlists into pitches.

The orchestration is:
1. Skip campaigns that request no pitches
2. Rank the catalog
3. Drop playlists that fail any required attribute
4. Create one pitch per top playlist, sequentially and in rank order

Pitch creation is awaited one at a time so the store allocates pitch IDs in
rank order. A failed creation (None from the store) is skipped; any other
error becomes a failed result instead of propagating.
"""

from attrs import define, field

from src.config import get_logger
from src.domain.entities import Campaign, Pitch, PitchDraft, Playlist
from src.domain.matching import (
    MatchingConfiguration,
    MatchResult,
    rank_playlists,
    select_qualified_matches,
)
from src.domain.repositories import PitchRepositoryProtocol, UnitOfWorkProtocol

from .match_campaign import resolve_configuration

logger = get_logger(__name__)

NO_PITCHES_REQUIRED_MESSAGE = "No pitches required for this campaign"
NO_MATCHES_MESSAGE = "No matching playlists found"
AUTO_MATCH_ERROR_MESSAGE = "An error occurred during automatic matching"
CAMPAIGN_NOT_FOUND_MESSAGE = "Campaign not found"


@define(frozen=True, slots=True)
class AutoMatchCampaignCommand:
    """Command for auto-matching a campaign against a playlist catalog."""

    campaign: Campaign
    playlists: list[Playlist] = field(factory=list)
    configuration: MatchingConfiguration | None = None


@define(frozen=True, slots=True)
class AutoMatchResult:
    """Outcome of an auto-match run.

    `pitches` holds only the pitches the store actually created, so its
    length can be lower than the campaign's requested count.
    """

    success: bool
    message: str
    pitches: list[Pitch] = field(factory=list)
    matches: list[MatchResult] = field(factory=list)

    @property
    def pitch_count(self) -> int:
        return len(self.pitches)


@define(slots=True)
class AutoMatchCampaignUseCase:
    """Create pitches for the best qualifying playlists of a campaign.

    Uses the UnitOfWork for the pitch store and, when the command carries no
    configuration, for the matching settings store.
    """

    async def execute(
        self,
        command: AutoMatchCampaignCommand,
        uow: UnitOfWorkProtocol,
    ) -> AutoMatchResult:
        """Execute auto-matching with explicit transaction control."""
        campaign = command.campaign
        try:
            pitches_required = campaign.pitches or 0
            if pitches_required <= 0:
                logger.info(
                    f"Campaign {campaign.campaign_id} requests no pitches, skipping"
                )
                return AutoMatchResult(
                    success=False, message=NO_PITCHES_REQUIRED_MESSAGE
                )

            async with uow:
                configuration = await resolve_configuration(
                    command.configuration, uow
                )
                ranked = rank_playlists(campaign, command.playlists, configuration)

                top_matches = select_qualified_matches(ranked, pitches_required)
                if not top_matches:
                    logger.info(
                        f"No playlist passes required attributes for campaign "
                        f"{campaign.campaign_id}"
                    )
                    return AutoMatchResult(success=False, message=NO_MATCHES_MESSAGE)

                pitches = await self._create_pitches(
                    campaign, top_matches, uow.get_pitch_repository()
                )

        except Exception as e:
            logger.exception(f"Error in auto-match for campaign {campaign.campaign_id}: {e}")
            return AutoMatchResult(success=False, message=AUTO_MATCH_ERROR_MESSAGE)

        logger.info(
            f"Auto-matched campaign {campaign.campaign_id}: "
            f"{len(pitches)}/{len(top_matches)} pitches created"
        )
        return AutoMatchResult(
            success=True,
            message=f"Successfully matched campaign with {len(pitches)} playlists",
            pitches=pitches,
            matches=top_matches,
        )

    async def _create_pitches(
        self,
        campaign: Campaign,
        matches: list[MatchResult],
        pitch_repo: PitchRepositoryProtocol,
    ) -> list[Pitch]:
        """Create one pitch per match, in order, skipping failed creations."""
        pitches: list[Pitch] = []

        for match in matches:
            draft = PitchDraft(
                campaign_id=campaign.campaign_id,
                client_id=campaign.client_id,
                track_link=campaign.track_link or "",
                playlist_id=match.playlist.id,
                status="matched",
            )
            pitch = await pitch_repo.create_pitch(draft)

            if pitch:
                pitches.append(pitch)
            else:
                logger.warning(
                    f"Pitch creation failed for campaign {campaign.campaign_id} "
                    f"and playlist {match.playlist.id}, continuing"
                )

        return pitches


async def run_auto_match_for_campaign(campaign_id: int) -> AutoMatchResult:
    """Auto-match a stored campaign against the stored catalog."""
    from src.infrastructure.persistence.database.db_connection import get_session
    from src.infrastructure.persistence.repositories.factories import get_unit_of_work

    async with get_session() as session:
        uow = get_unit_of_work(session)
        async with uow:
            campaign = await uow.get_campaign_repository().get_campaign_by_id(
                campaign_id
            )
            playlists = await uow.get_playlist_repository().list_playlists()

        if campaign is None:
            return AutoMatchResult(success=False, message=CAMPAIGN_NOT_FOUND_MESSAGE)

        command = AutoMatchCampaignCommand(campaign=campaign, playlists=playlists)
        return await AutoMatchCampaignUseCase().execute(command, uow)
