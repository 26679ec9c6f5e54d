"""Tests for campaign, playlist and pitch entities."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.domain.entities import Campaign, Pitch, PitchDraft, Playlist, ensure_utc


class TestCampaign:
    """Test campaign entity behavior."""

    def test_with_id_copies_fields(self, campaign):
        """Assigning an ID keeps every other field."""
        unsaved = Campaign(client_id="c-9", track_name="Song", pitches=3)

        saved = unsaved.with_id(42)

        assert saved.campaign_id == 42
        assert saved.track_name == "Song"
        assert saved.pitches == 3
        assert unsaved.campaign_id is None

    def test_with_id_rejects_invalid(self):
        """IDs must be positive integers."""
        with pytest.raises(ValueError):
            Campaign(client_id="c").with_id(0)

    def test_pitches_must_be_int(self):
        """Requested pitch count is validated."""
        with pytest.raises(TypeError):
            Campaign(client_id="c", pitches="3")

    def test_display_name(self):
        """Display name falls back to the ID."""
        assert Campaign(track_name="Song").display_name == "Song"
        assert Campaign(campaign_id=7).display_name == "Campaign #7"


class TestPlaylist:
    """Test playlist entity behavior."""

    def test_id_required_string(self):
        """Playlists are keyed by a string ID."""
        with pytest.raises(TypeError):
            Playlist(id=12)

    def test_multi_valued_defaults(self):
        """List attributes default to empty lists."""
        playlist = Playlist(id="p")

        assert playlist.mood == []
        assert playlist.tempo == []
        assert playlist.genre is None


class TestPitch:
    """Test pitch entities."""

    def test_draft_defaults_to_matched(self):
        """New pitches start in the matched status."""
        draft = PitchDraft(
            campaign_id=1, client_id="c", track_link="link", playlist_id="p"
        )

        assert draft.status == "matched"

    def test_draft_rejects_unknown_status(self):
        """Status must be one of the known pitch statuses."""
        with pytest.raises(ValueError):
            PitchDraft(
                campaign_id=1,
                client_id="c",
                track_link="link",
                playlist_id="p",
                status="archived",
            )

    def test_from_draft(self):
        """A stored pitch carries the draft's fields and store values."""
        draft = PitchDraft(
            campaign_id=1, client_id="c", track_link="link", playlist_id="p"
        )
        created = datetime(2024, 5, 1, tzinfo=UTC)

        pitch = Pitch.from_draft(draft, pitch_id=1000, created_at=created)

        assert pitch.pitch_id == 1000
        assert pitch.playlist_id == "p"
        assert pitch.created_at == pitch.updated_at == created


class TestEnsureUtc:
    """Test timestamp normalization."""

    def test_naive_assumed_utc(self):
        """Naive datetimes are tagged as UTC."""
        result = ensure_utc(datetime(2024, 1, 1, 12, 0))

        assert result.tzinfo == UTC
        assert result.hour == 12

    def test_aware_converted(self):
        """Aware datetimes are converted to UTC."""
        plus_two = timezone(timedelta(hours=2))

        result = ensure_utc(datetime(2024, 1, 1, 12, 0, tzinfo=plus_two))

        assert result.hour == 10

    def test_none_passthrough(self):
        """None stays None."""
        assert ensure_utc(None) is None
