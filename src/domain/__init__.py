"""Pitchmatch domain layer - pure business logic with no I/O."""

from . import entities, matching

from .entities import Campaign, Pitch, PitchDraft, Playlist
from .matching import (
    AttributeDefinition,
    AttributeOutcome,
    MatchingConfiguration,
    MatchResult,
    TierGapAttribute,
    calculate_match_score,
    get_default_matching_configuration,
    rank_playlists,
)

__all__ = [
    # Modules
    "entities",
    "matching",
    # Entities
    "Campaign",
    "Pitch",
    "PitchDraft",
    "Playlist",
    # Matching types
    "AttributeDefinition",
    "AttributeOutcome",
    "MatchResult",
    "MatchingConfiguration",
    "TierGapAttribute",
    # Matching functions
    "calculate_match_score",
    "get_default_matching_configuration",
    "rank_playlists",
]
