"""Domain layer test fixtures - Pure business objects with no dependencies.

These fixtures create campaigns, playlists and configurations for testing
the matching logic. Fast creation, function-scoped for isolation.
"""

import pytest

from src.domain.entities import Campaign, Playlist
from src.domain.matching import (
    AttributeDefinition,
    MatchingConfiguration,
    get_default_matching_configuration,
)


@pytest.fixture
def campaign():
    """Pop campaign requesting two placements."""
    return Campaign(
        campaign_id=1,
        client_id="client-1",
        track_name="Summer Nights",
        track_link="https://open.spotify.com/track/summer-nights",
        campaign_type="playlist",
        genre="Pop",
        subgenre=["Dance Pop", "Electropop"],
        language="English",
        vocal_type="Female",
        mood=["Happy", "Energetic"],
        tempo="Fast",
        tier=50,
        pitches=2,
    )


@pytest.fixture
def perfect_playlist():
    """Playlist matching every default attribute of `campaign` (115 points)."""
    return Playlist(
        id="pl-perfect",
        name="Pop Hits",
        owner="curator-1",
        followers=120_000,
        genre="pop",
        subgenre=["Dance Pop"],
        language="English",
        vocal_type="Female",
        mood=["Happy"],
        tempo=["Fast"],
        tier=53,
    )


@pytest.fixture
def required_only_playlist():
    """Playlist matching only the four required attributes (80 points)."""
    return Playlist(
        id="pl-required",
        name="Easy Listening",
        owner="curator-2",
        followers=8_000,
        genre="Pop",
        subgenre=["Indie Pop"],
        language="english",
        vocal_type="Female",
        mood=["Sad"],
        tempo=["Slow"],
        tier=48,
    )


@pytest.fixture
def rock_playlist():
    """Playlist failing genre, vocal type and tier gap (35 points, disqualified)."""
    return Playlist(
        id="pl-rock",
        name="Rock Anthems",
        owner="curator-3",
        followers=54_000,
        genre="Rock",
        subgenre=[],
        language="English",
        vocal_type="Male",
        mood=["Happy"],
        tempo=[],
        tier=60,
    )


@pytest.fixture
def catalog(rock_playlist, perfect_playlist, required_only_playlist):
    """Catalog listed in an order that differs from the ranking."""
    return [rock_playlist, perfect_playlist, required_only_playlist]


@pytest.fixture
def default_configuration():
    """Built-in seven-attribute configuration."""
    return get_default_matching_configuration()


@pytest.fixture
def weighted_configuration():
    """Three optional attributes worth 50, 30 and 20 points."""
    return MatchingConfiguration(
        attributes=[
            AttributeDefinition(
                id="genre",
                name="Genre",
                points=50,
                source_campaign_field="genre",
                source_playlist_field="genre",
            ),
            AttributeDefinition(
                id="mood",
                name="Mood",
                points=30,
                source_campaign_field="mood",
                source_playlist_field="mood",
            ),
            AttributeDefinition(
                id="tempo",
                name="Tempo",
                points=20,
                source_campaign_field="tempo",
                source_playlist_field="tempo",
            ),
        ]
    )
