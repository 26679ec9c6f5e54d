"""Campaign-to-playlist matching: attribute configuration, scoring and ranking."""

from .algorithms import (
    calculate_match_score,
    rank_playlists,
    resolve_field_path,
    select_qualified_matches,
)
from .defaults import DEFAULT_TIER_MAX_DIFFERENCE, get_default_matching_configuration
from .predicates import coerce_tier, tier_gap_match, values_match
from .types import (
    AttributeDefinition,
    AttributeOutcome,
    MatchingConfiguration,
    MatchResult,
    TierGapAttribute,
    attribute_from_dict,
)

__all__ = [
    "DEFAULT_TIER_MAX_DIFFERENCE",
    "AttributeDefinition",
    "AttributeOutcome",
    "MatchResult",
    "MatchingConfiguration",
    "TierGapAttribute",
    "attribute_from_dict",
    "calculate_match_score",
    "coerce_tier",
    "get_default_matching_configuration",
    "rank_playlists",
    "resolve_field_path",
    "select_qualified_matches",
    "tier_gap_match",
    "values_match",
]
