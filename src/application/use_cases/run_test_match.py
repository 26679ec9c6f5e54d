"""Test match use case: preview the best playlists for a stored campaign.

Used by administrators to try a configuration before saving it. Nothing is
persisted; the top results are returned for display.
"""

from attrs import define, field

from src.config import get_logger, resilient_operation, settings
from src.domain.matching import MatchingConfiguration, MatchResult, rank_playlists
from src.domain.repositories import UnitOfWorkProtocol

from .match_campaign import resolve_configuration

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class RunTestMatchCommand:
    """Command for previewing matches of one stored campaign."""

    campaign_id: int
    configuration: MatchingConfiguration | None = None
    limit: int | None = None


@define(frozen=True, slots=True)
class MatchPreviewResult:
    """Outcome of a test match. `results` holds only the top entries."""

    success: bool
    message: str
    results: list[MatchResult] = field(factory=list)


@define(slots=True)
class RunTestMatchUseCase:
    """Rank the whole catalog for one campaign and return the top results."""

    async def execute(
        self,
        command: RunTestMatchCommand,
        uow: UnitOfWorkProtocol,
    ) -> MatchPreviewResult:
        """Execute the test match, reporting failures as structured results."""
        limit = command.limit or settings.matching.test_match_limit

        try:
            async with uow:
                campaign = await uow.get_campaign_repository().get_campaign_by_id(
                    command.campaign_id
                )
                if not campaign:
                    return MatchPreviewResult(success=False, message="Campaign not found")

                playlists = await uow.get_playlist_repository().list_playlists()
                if not playlists:
                    return MatchPreviewResult(
                        success=False, message="No playlists available for matching"
                    )

                configuration = await resolve_configuration(
                    command.configuration, uow
                )

            results = rank_playlists(campaign, playlists, configuration)
        except Exception as e:
            logger.exception(f"Error running test match for {command.campaign_id}: {e}")
            return MatchPreviewResult(
                success=False,
                message="An error occurred while running the test match",
            )

        return MatchPreviewResult(
            success=True,
            message=f"Found {len(results)} potential matches",
            results=results[:limit],
        )


@resilient_operation("test_match")
async def run_test_match(
    campaign_id: int,
    configuration: MatchingConfiguration | None = None,
    limit: int | None = None,
) -> MatchPreviewResult:
    """Preview matches for a stored campaign (convenience function)."""
    from src.infrastructure.persistence.database.db_connection import get_session
    from src.infrastructure.persistence.repositories.factories import get_unit_of_work

    async with get_session() as session:
        uow = get_unit_of_work(session)
        command = RunTestMatchCommand(
            campaign_id=campaign_id,
            configuration=configuration,
            limit=limit,
        )
        return await RunTestMatchUseCase().execute(command, uow)
