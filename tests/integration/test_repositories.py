"""Integration tests for the SQLite reference repositories."""

import pytest
from sqlalchemy import select

from src.domain.entities import Campaign, PitchDraft, Playlist
from src.domain.matching import (
    AttributeDefinition,
    MatchingConfiguration,
    TierGapAttribute,
)
from src.infrastructure.persistence.database.db_models import DBMatchingSettings
from src.infrastructure.persistence.repositories import (
    CampaignRepository,
    MatchingSettingsRepository,
    PitchRepository,
    PlaylistRepository,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def playlist_repo(db_session):
    return PlaylistRepository(db_session)


@pytest.fixture
def campaign_repo(db_session):
    return CampaignRepository(db_session)


@pytest.fixture
def pitch_repo(db_session):
    return PitchRepository(db_session)


@pytest.fixture
def settings_repo(db_session):
    return MatchingSettingsRepository(db_session)


class TestPlaylistRepository:
    """Test playlist persistence."""

    async def test_save_and_get(self, playlist_repo):
        """Playlists round-trip with list attributes and metadata."""
        playlist = Playlist(
            id="pl-1",
            name="Indie Mornings",
            followers=3_200,
            genre="Indie",
            subgenre=["Bedroom Pop"],
            mood=["Calm", "Happy"],
            tempo=["Mid"],
            era=["2010s"],
            tier=12,
            metadata={"region": "EU"},
        )

        await playlist_repo.save_playlist(playlist)
        stored = await playlist_repo.get_playlist_by_id("pl-1")

        assert stored == playlist

    async def test_save_updates_existing(self, playlist_repo):
        """Saving an existing ID updates it in place."""
        await playlist_repo.save_playlist(Playlist(id="pl-1", name="Old"))
        await playlist_repo.save_playlist(Playlist(id="pl-1", name="New"))

        playlists = await playlist_repo.list_playlists()

        assert [p.name for p in playlists] == ["New"]

    async def test_list_keeps_insertion_order(self, playlist_repo):
        """The catalog lists in the order playlists were added."""
        for playlist_id in ["b", "a", "c"]:
            await playlist_repo.save_playlist(Playlist(id=playlist_id))

        playlists = await playlist_repo.list_playlists()

        assert [p.id for p in playlists] == ["b", "a", "c"]

    async def test_missing_playlist(self, playlist_repo):
        """Unknown IDs return None."""
        assert await playlist_repo.get_playlist_by_id("nope") is None


class TestCampaignRepository:
    """Test campaign persistence."""

    async def test_insert_assigns_id(self, campaign_repo):
        """New campaigns receive a store-assigned ID."""
        saved = await campaign_repo.save_campaign(
            Campaign(client_id="c", track_name="Song", genre=["Pop", "Dance"], pitches=2)
        )

        assert saved.campaign_id is not None
        stored = await campaign_repo.get_campaign_by_id(saved.campaign_id)
        assert stored.genre == ["Pop", "Dance"]
        assert stored.pitches == 2

    async def test_update_existing(self, campaign_repo):
        """Saving a campaign with an ID updates the row."""
        saved = await campaign_repo.save_campaign(Campaign(client_id="c", pitches=1))

        await campaign_repo.save_campaign(
            Campaign(campaign_id=saved.campaign_id, client_id="c", pitches=5)
        )

        campaigns = await campaign_repo.list_campaigns()
        assert len(campaigns) == 1
        assert campaigns[0].pitches == 5


class TestPitchRepository:
    """Test pitch creation and lookup."""

    async def test_create_pitches(self, campaign_repo, playlist_repo, pitch_repo):
        """Pitches get increasing IDs and can be listed by campaign."""
        campaign = await campaign_repo.save_campaign(
            Campaign(client_id="c", track_link="link", pitches=2)
        )
        await playlist_repo.save_playlist(Playlist(id="pl-1"))
        await playlist_repo.save_playlist(Playlist(id="pl-2"))

        first = await pitch_repo.create_pitch(
            PitchDraft(campaign.campaign_id, "c", "link", "pl-1")
        )
        second = await pitch_repo.create_pitch(
            PitchDraft(campaign.campaign_id, "c", "link", "pl-2")
        )

        assert first.pitch_id < second.pitch_id
        assert first.status == "matched"
        assert first.created_at.tzinfo is not None
        pitches = await pitch_repo.get_pitches_by_campaign(campaign.campaign_id)
        assert [p.playlist_id for p in pitches] == ["pl-1", "pl-2"]

    async def test_failed_pitch_returns_none(
        self, campaign_repo, playlist_repo, pitch_repo
    ):
        """A constraint violation fails only that pitch."""
        campaign = await campaign_repo.save_campaign(
            Campaign(client_id="c", pitches=2)
        )
        await playlist_repo.save_playlist(Playlist(id="pl-1"))

        missing = await pitch_repo.create_pitch(
            PitchDraft(campaign.campaign_id, "c", "", "unknown-playlist")
        )
        created = await pitch_repo.create_pitch(
            PitchDraft(campaign.campaign_id, "c", "", "pl-1")
        )

        assert missing is None
        assert created is not None
        assert [p.playlist_id for p in await pitch_repo.list_pitches()] == ["pl-1"]


class TestMatchingSettingsRepository:
    """Test stored configuration handling."""

    async def test_nothing_stored(self, settings_repo):
        """An empty store returns None."""
        assert await settings_repo.get_matching_settings() is None

    async def test_save_and_replace(self, settings_repo):
        """Saving twice keeps only the latest configuration."""
        first = MatchingConfiguration(
            attributes=[AttributeDefinition(id="genre", name="Genre", points=10)]
        )
        second = MatchingConfiguration(
            attributes=[
                TierGapAttribute(
                    id="tier",
                    name="Tier",
                    points=5,
                    max_difference=2,
                    source_campaign_field="tier",
                    source_playlist_field="tier",
                )
            ]
        )

        await settings_repo.save_matching_settings(first)
        await settings_repo.save_matching_settings(second)

        assert await settings_repo.get_matching_settings() == second

    async def test_clear(self, settings_repo):
        """Clearing makes the store report nothing saved."""
        await settings_repo.save_matching_settings(
            MatchingConfiguration(attributes=[AttributeDefinition(id="a", name="A")])
        )

        await settings_repo.clear_matching_settings()

        assert await settings_repo.get_matching_settings() is None

    async def test_corrupt_payload_raises(self, settings_repo, db_session):
        """Unparseable payloads raise so callers can fall back."""
        db_session.add(
            DBMatchingSettings(
                settings_key="matching:settings", payload={"attributes": "genre"}
            )
        )
        await db_session.flush()

        with pytest.raises(ValueError):
            await settings_repo.get_matching_settings()

        rows = (await db_session.execute(select(DBMatchingSettings))).scalars().all()
        assert len(rows) == 1
