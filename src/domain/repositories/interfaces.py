"""Domain repository interfaces following Clean Architecture principles.

These interfaces define the contracts the matching engine's collaborators
fulfil (settings, campaign, playlist and pitch stores) without depending on
infrastructure implementations, following the dependency inversion principle.
"""

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from src.domain.entities import Campaign, Pitch, PitchDraft, Playlist
    from src.domain.matching.types import MatchingConfiguration


class MatchingSettingsRepositoryProtocol(Protocol):
    """Repository interface for the stored matching configuration."""

    def get_matching_settings(self) -> Awaitable["MatchingConfiguration | None"]:
        """Get the stored configuration, or None when nothing has been saved."""
        ...

    def save_matching_settings(
        self, configuration: "MatchingConfiguration"
    ) -> Awaitable["MatchingConfiguration"]:
        """Replace the stored configuration."""
        ...

    def clear_matching_settings(self) -> Awaitable[None]:
        """Remove the stored configuration so the defaults apply again."""
        ...


class CampaignRepositoryProtocol(Protocol):
    """Repository interface for campaign persistence operations."""

    def get_campaign_by_id(self, campaign_id: int) -> Awaitable["Campaign | None"]:
        """Get campaign by ID, or None if it does not exist."""
        ...

    def list_campaigns(self) -> Awaitable[list["Campaign"]]:
        """List every campaign."""
        ...

    def save_campaign(self, campaign: "Campaign") -> Awaitable["Campaign"]:
        """Insert or update a campaign and return it with its ID."""
        ...


class PlaylistRepositoryProtocol(Protocol):
    """Repository interface for the playlist catalog."""

    def list_playlists(self) -> Awaitable[list["Playlist"]]:
        """List the full playlist catalog."""
        ...

    def get_playlist_by_id(self, playlist_id: str) -> Awaitable["Playlist | None"]:
        """Get playlist by ID, or None if it does not exist."""
        ...

    def save_playlist(self, playlist: "Playlist") -> Awaitable["Playlist"]:
        """Insert or update a playlist."""
        ...


class PitchRepositoryProtocol(Protocol):
    """Repository interface for pitch persistence operations."""

    def create_pitch(self, draft: "PitchDraft") -> Awaitable["Pitch | None"]:
        """Create a single pitch.

        Returns:
            The stored pitch, or None when this one could not be created.
            A None result is not fatal to a batch of creations.
        """
        ...

    def get_pitches_by_campaign(self, campaign_id: int) -> Awaitable[list["Pitch"]]:
        """Get all pitches for a campaign, oldest first."""
        ...

    def list_pitches(self) -> Awaitable[list["Pitch"]]:
        """List every pitch, oldest first."""
        ...


class UnitOfWorkProtocol(Protocol):
    """Unit of Work interface for transaction boundary management.

    Allows the application layer to control transaction boundaries while
    keeping implementation details in the infrastructure layer. Each UnitOfWork
    instance manages a single transaction and provides access to all
    repositories sharing that transaction.
    """

    async def __aenter__(self) -> Self:
        """Enter async context manager."""
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context manager with automatic commit/rollback."""
        ...

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        ...

    def get_matching_settings_repository(self) -> MatchingSettingsRepositoryProtocol:
        """Get matching settings repository using this unit of work's transaction."""
        ...

    def get_campaign_repository(self) -> CampaignRepositoryProtocol:
        """Get campaign repository using this unit of work's transaction."""
        ...

    def get_playlist_repository(self) -> PlaylistRepositoryProtocol:
        """Get playlist repository using this unit of work's transaction."""
        ...

    def get_pitch_repository(self) -> PitchRepositoryProtocol:
        """Get pitch repository using this unit of work's transaction."""
        ...
