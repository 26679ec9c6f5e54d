"""Unit tests for RunTestMatchUseCase."""

import pytest

from src.application.use_cases.run_test_match import (
    RunTestMatchCommand,
    RunTestMatchUseCase,
)
from src.domain.entities import Playlist


@pytest.fixture
def stored(mock_uow, campaign, catalog):
    """Campaign and catalog returned by the mocked stores."""
    mock_uow.get_campaign_repository.return_value.get_campaign_by_id.return_value = (
        campaign
    )
    mock_uow.get_playlist_repository.return_value.list_playlists.return_value = (
        catalog
    )
    return mock_uow


class TestRunTestMatch:
    """Test match previews."""

    async def test_campaign_not_found(self, mock_uow):
        """Unknown campaigns produce a failed result."""
        mock_uow.get_campaign_repository.return_value.get_campaign_by_id.return_value = (
            None
        )

        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=404), mock_uow
        )

        assert result.success is False
        assert result.message == "Campaign not found"
        assert result.results == []

    async def test_no_playlists(self, mock_uow, campaign):
        """An empty catalog produces a failed result."""
        mock_uow.get_campaign_repository.return_value.get_campaign_by_id.return_value = (
            campaign
        )
        mock_uow.get_playlist_repository.return_value.list_playlists.return_value = []

        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=1), mock_uow
        )

        assert result.success is False
        assert result.message == "No playlists available for matching"

    async def test_ranks_whole_catalog(self, stored):
        """Every playlist is ranked, including disqualified ones."""
        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=1), stored
        )

        assert result.success is True
        assert result.message == "Found 3 potential matches"
        assert [r.playlist.id for r in result.results] == [
            "pl-perfect",
            "pl-required",
            "pl-rock",
        ]
        stored.get_campaign_repository.return_value.get_campaign_by_id.assert_awaited_once_with(
            1
        )

    async def test_default_limit_is_five(self, mock_uow, campaign):
        """Only the top five results are returned by default."""
        mock_uow.get_campaign_repository.return_value.get_campaign_by_id.return_value = (
            campaign
        )
        mock_uow.get_playlist_repository.return_value.list_playlists.return_value = [
            Playlist(id=f"p{i}", genre="Pop") for i in range(8)
        ]

        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=1), mock_uow
        )

        assert result.message == "Found 8 potential matches"
        assert len(result.results) == 5

    async def test_explicit_limit(self, stored):
        """A caller-provided limit overrides the default."""
        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=1, limit=1), stored
        )

        assert [r.playlist.id for r in result.results] == ["pl-perfect"]

    async def test_candidate_configuration(self, stored, weighted_configuration):
        """A configuration under evaluation is used instead of stored settings."""
        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=1, configuration=weighted_configuration),
            stored,
        )

        assert result.success is True
        assert result.results[0].total_possible_points == 100
        stored.get_matching_settings_repository.assert_not_called()

    async def test_error_becomes_failed_result(self, mock_uow):
        """Store errors are reported, not raised."""
        mock_uow.get_campaign_repository.return_value.get_campaign_by_id.side_effect = (
            RuntimeError("connection lost")
        )

        result = await RunTestMatchUseCase().execute(
            RunTestMatchCommand(campaign_id=1), mock_uow
        )

        assert result.success is False
        assert result.message == "An error occurred while running the test match"
