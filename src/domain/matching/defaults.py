"""Default matching configuration used when no settings have been stored."""

from .types import AttributeDefinition, MatchingConfiguration, TierGapAttribute

DEFAULT_TIER_MAX_DIFFERENCE = 5


def get_default_matching_configuration() -> MatchingConfiguration:
    """Build the default seven-attribute configuration.

    The four required attributes (genre, language, vocal type, tier gap) form
    the primary group; subgenre, mood and tempo are optional extras. Total
    possible points: 115.
    """
    return MatchingConfiguration(
        attributes=[
            # Primary matching attributes
            AttributeDefinition(
                id="genre",
                name="Genre",
                required=True,
                points=20,
                source_campaign_field="genre",
                source_playlist_field="genre",
            ),
            AttributeDefinition(
                id="language",
                name="Language",
                required=True,
                points=20,
                source_campaign_field="language",
                source_playlist_field="language",
            ),
            AttributeDefinition(
                id="vocal_type",
                name="Vocal Type",
                required=True,
                points=20,
                source_campaign_field="vocal_type",
                source_playlist_field="vocal_type",
            ),
            TierGapAttribute(
                id="tier_gap",
                name="Tier Gap",
                required=True,
                points=20,
                max_difference=DEFAULT_TIER_MAX_DIFFERENCE,
                source_campaign_field="tier",
                source_playlist_field="tier",
            ),
            # Secondary matching attributes
            AttributeDefinition(
                id="subgenre",
                name="Subgenre",
                required=False,
                points=10,
                source_campaign_field="subgenre",
                source_playlist_field="subgenre",
            ),
            AttributeDefinition(
                id="mood",
                name="Mood",
                required=False,
                points=15,
                source_campaign_field="mood",
                source_playlist_field="mood",
            ),
            AttributeDefinition(
                id="tempo",
                name="Tempo",
                required=False,
                points=10,
                source_campaign_field="tempo",
                source_playlist_field="tempo",
            ),
        ]
    )
