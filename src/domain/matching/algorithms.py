"""Pure algorithms for campaign-to-playlist matching and ranking.

These functions contain no I/O and implement the core business logic for
scoring how well a playlist fits a campaign under a given attribute
configuration.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .types import AttributeOutcome, MatchingConfiguration, MatchResult


def resolve_field_path(record: Any, field_path: str) -> Any:
    """Resolve a dotted field path against a record.

    Each segment is looked up as a mapping key when the current value is a
    mapping, otherwise as an attribute. Returns None when the path is empty,
    a segment is missing, or an intermediate value is None. Never raises.

    Args:
        record: Campaign, playlist, or any nested mapping/object
        field_path: Dotted path such as "genre" or "metadata.tier"

    Returns:
        The value found, or None
    """
    if not field_path or not isinstance(field_path, str):
        return None

    value = record
    for part in field_path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)

    return value


def calculate_match_score(
    campaign: Any,
    playlist: Any,
    configuration: MatchingConfiguration,
) -> MatchResult:
    """Score one playlist against one campaign.

    Every attribute contributes its points to the total possible points.
    Matched attributes add their points to the score; unmatched ones add
    nothing. A failed required attribute is recorded in the breakdown but
    does not stop evaluation of the remaining attributes; callers that need
    the veto check `MatchResult.passes_required`.

    Args:
        campaign: Campaign record (read through field paths)
        playlist: Playlist record (read through field paths)
        configuration: Attributes to evaluate, in order

    Returns:
        MatchResult with score, ordered breakdown, and total possible points
    """
    breakdown: list[AttributeOutcome] = []
    score = 0
    total_possible_points = 0

    for attribute in configuration.attributes:
        campaign_value = resolve_field_path(campaign, attribute.source_campaign_field)
        playlist_value = resolve_field_path(playlist, attribute.source_playlist_field)

        matched = attribute.matches(campaign_value, playlist_value)

        total_possible_points += attribute.points

        if matched:
            score += attribute.points

        breakdown.append(
            AttributeOutcome(
                attribute_id=attribute.id,
                attribute_name=attribute.name,
                points=attribute.points if matched else 0,
                matched=matched,
                required=attribute.required,
                campaign_value=campaign_value,
                playlist_value=playlist_value,
            )
        )

    return MatchResult(
        playlist=playlist,
        score=score,
        breakdown=breakdown,
        total_possible_points=total_possible_points,
    )


def rank_playlists(
    campaign: Any,
    playlists: Iterable[Any],
    configuration: MatchingConfiguration,
) -> list[MatchResult]:
    """Score every playlist in the catalog and sort by score, highest first.

    The sort is stable: playlists with equal scores keep their catalog order.
    An empty catalog yields an empty list.
    """
    results = [
        calculate_match_score(campaign, playlist, configuration)
        for playlist in playlists
    ]
    results.sort(key=lambda result: result.score, reverse=True)
    return results


def select_qualified_matches(
    results: Iterable[MatchResult],
    limit: int | None = None,
) -> list[MatchResult]:
    """Keep results that pass every required attribute, up to `limit`.

    Input order is preserved, so feeding ranked results yields the top
    qualifying playlists.
    """
    qualified = [result for result in results if result.passes_required]
    if limit is None:
        return qualified
    return qualified[: max(limit, 0)]
