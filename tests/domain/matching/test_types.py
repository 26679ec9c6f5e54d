"""Tests for matching configuration types and their stored wire shape."""

import pytest

from src.domain.entities import Playlist
from src.domain.matching import (
    AttributeDefinition,
    AttributeOutcome,
    MatchingConfiguration,
    MatchResult,
    TierGapAttribute,
    attribute_from_dict,
    get_default_matching_configuration,
)


class TestAttributeDefinition:
    """Test attribute construction and validation."""

    def test_negative_points_rejected(self):
        """Points must be non-negative."""
        with pytest.raises(ValueError, match="points"):
            AttributeDefinition(id="genre", name="Genre", points=-1)

    def test_negative_max_difference_rejected(self):
        """Tier gap tolerance must be non-negative."""
        with pytest.raises(ValueError, match="max_difference"):
            TierGapAttribute(id="tier", name="Tier", max_difference=-2)

    def test_standard_attribute_uses_equality(self):
        """Standard attributes compare with the overlap predicate."""
        attribute = AttributeDefinition(id="genre", name="Genre", points=10)

        assert attribute.matches("Pop", "pop") is True
        assert attribute.matches(50, 53) is False

    def test_tier_gap_variant_is_explicit_in_type(self):
        """Tolerance matching depends on the type, not the id."""
        tier_named = AttributeDefinition(id="tier_gap", name="Tier Gap", points=20)
        custom = TierGapAttribute(
            id="audience_size", name="Audience", points=20, max_difference=5
        )

        assert tier_named.matches(50, 53) is False
        assert custom.matches(50, 53) is True


class TestMatchingConfiguration:
    """Test configuration behavior."""

    def test_duplicate_ids_rejected(self):
        """Attribute ids are unique within a configuration."""
        with pytest.raises(ValueError, match="Duplicate"):
            MatchingConfiguration(
                attributes=[
                    AttributeDefinition(id="genre", name="Genre"),
                    AttributeDefinition(id="genre", name="Genre again"),
                ]
            )

    def test_attributes_stored_as_tuple(self):
        """Lists are converted so the configuration stays immutable."""
        configuration = MatchingConfiguration(
            attributes=[AttributeDefinition(id="genre", name="Genre")]
        )

        assert isinstance(configuration.attributes, tuple)

    def test_default_configuration_shape(self):
        """Built-in default has seven attributes worth 115 points."""
        configuration = get_default_matching_configuration()

        assert configuration.total_points == 115
        assert [a.id for a in configuration.attributes if a.required] == [
            "genre",
            "language",
            "vocal_type",
            "tier_gap",
        ]
        tier_gap = configuration.get_attribute("tier_gap")
        assert isinstance(tier_gap, TierGapAttribute)
        assert tier_gap.max_difference == 5
        assert tier_gap.source_campaign_field == "tier"

    def test_primary_and_secondary_grouping(self):
        """First four attributes are primary, the rest secondary."""
        configuration = get_default_matching_configuration()

        assert [a.id for a in configuration.primary_attributes()] == [
            "genre",
            "language",
            "vocal_type",
            "tier_gap",
        ]
        assert [a.id for a in configuration.secondary_attributes()] == [
            "subgenre",
            "mood",
            "tempo",
        ]

    def test_get_attribute_missing(self):
        """Unknown ids return None."""
        assert get_default_matching_configuration().get_attribute("era") is None

    def test_wire_shape(self):
        """Serialization uses the stored settings keys."""
        data = get_default_matching_configuration().to_dict()

        genre = data["attributes"][0]
        assert genre == {
            "id": "genre",
            "name": "Genre",
            "required": True,
            "points": 20,
            "sourceCampaign": "genre",
            "sourcePlaylist": "genre",
        }
        tier_gap = data["attributes"][3]
        assert tier_gap["maxDifference"] == 5

    def test_from_dict_restores_tier_gap_variant(self):
        """Entries with maxDifference load as tier gap attributes."""
        original = get_default_matching_configuration()

        restored = MatchingConfiguration.from_dict(original.to_dict())

        assert restored == original
        assert isinstance(restored.get_attribute("tier_gap"), TierGapAttribute)

    def test_from_dict_rejects_missing_attributes(self):
        """Payloads without an attributes list are rejected."""
        with pytest.raises(ValueError, match="attributes"):
            MatchingConfiguration.from_dict({"fields": []})

    def test_from_dict_rejects_negative_points(self):
        """Invalid attribute values surface as ValueError."""
        with pytest.raises(ValueError):
            MatchingConfiguration.from_dict(
                {"attributes": [{"id": "genre", "points": -5}]}
            )


class TestAttributeFromDict:
    """Test parsing of single attribute entries."""

    def test_defaults_for_optional_keys(self):
        """Missing optional keys fall back to defaults."""
        attribute = attribute_from_dict({"id": "mood"})

        assert attribute == AttributeDefinition(id="mood", name="mood")

    def test_missing_id(self):
        """The id key is mandatory."""
        with pytest.raises(ValueError, match="missing key"):
            attribute_from_dict({"name": "Genre"})

    def test_non_mapping(self):
        """Entries must be mappings."""
        with pytest.raises(ValueError):
            attribute_from_dict(["genre"])

    def test_non_numeric_points(self):
        """Points must be numeric."""
        with pytest.raises(ValueError):
            attribute_from_dict({"id": "genre", "points": "lots"})


class TestMatchResult:
    """Test result properties."""

    def test_passes_required(self):
        """A failed required outcome disqualifies the result."""
        outcomes = [
            AttributeOutcome("genre", "Genre", 0, matched=False, required=True),
            AttributeOutcome("mood", "Mood", 15, matched=True, required=False),
        ]
        result = MatchResult(
            playlist=Playlist(id="p"),
            score=15,
            breakdown=outcomes,
            total_possible_points=35,
        )

        assert result.passes_required is False
        assert result.percentage == pytest.approx(15 / 35 * 100)

    def test_failed_optional_does_not_disqualify(self):
        """Optional misses do not affect qualification."""
        outcomes = [AttributeOutcome("mood", "Mood", 0, matched=False, required=False)]
        result = MatchResult(playlist=Playlist(id="p"), score=0, breakdown=outcomes)

        assert result.passes_required is True
        assert result.percentage == 0.0

    def test_as_dict(self):
        """Display form carries playlist id, rounded percentage and breakdown."""
        outcome = AttributeOutcome(
            "genre", "Genre", 20, matched=True, required=True,
            campaign_value="Pop", playlist_value="pop",
        )
        result = MatchResult(
            playlist=Playlist(id="p-1"),
            score=20,
            breakdown=[outcome],
            total_possible_points=30,
        )

        data = result.as_dict()

        assert data["playlist_id"] == "p-1"
        assert data["percentage"] == 66.7
        assert data["passes_required"] is True
        assert data["breakdown"][0]["campaign_value"] == "Pop"
