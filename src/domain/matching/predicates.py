"""Match predicates comparing one campaign value with one playlist value.

Values arrive already resolved from their records, so they can be anything a
JSON-like record holds: strings, numbers, lists, or None.
"""

import math
from typing import Any


def _normalize_text(value: Any) -> Any:
    """Fold strings for case-insensitive comparison, leave other values as-is."""
    if isinstance(value, str):
        return value.lower()
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple | set | frozenset)


def _stringify(value: Any) -> str:
    """Lowercased string form; integral floats print without a fraction."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).lower()


def values_match(campaign_value: Any, playlist_value: Any) -> bool:
    """Decide whether a campaign value and a playlist value match.

    Rules, first applicable wins:
    1. Both sequences: match if they share at least one element.
    2. One sequence: match if it contains the other (scalar) value.
    3. Either value is None: match only if both are None.
    4. Otherwise compare string forms case-insensitively. Integral floats
       print like ints, so 50 matches 50.0.

    String elements are compared case-insensitively in every branch, so
    ["Pop"] matches "pop" just like "Pop" matches "pop".
    """
    campaign_is_seq = _is_sequence(campaign_value)
    playlist_is_seq = _is_sequence(playlist_value)

    if campaign_is_seq and playlist_is_seq:
        playlist_items = [_normalize_text(v) for v in playlist_value]
        return any(_normalize_text(v) in playlist_items for v in campaign_value)

    if campaign_is_seq:
        target = _normalize_text(playlist_value)
        return any(_normalize_text(v) == target for v in campaign_value)

    if playlist_is_seq:
        target = _normalize_text(campaign_value)
        return any(_normalize_text(v) == target for v in playlist_value)

    if campaign_value is None or playlist_value is None:
        return campaign_value is None and playlist_value is None

    return _stringify(campaign_value) == _stringify(playlist_value)


def coerce_tier(value: Any) -> float:
    """Coerce a tier value to a number; missing or non-numeric values become 0.

    A one-element list counts as its element, so [5] and ["5"] are tier 5.
    Empty or longer lists become 0.
    """
    if isinstance(value, list | tuple):
        if len(value) != 1:
            return 0.0
        value = value[0]
    if value is None or isinstance(value, list | tuple | dict):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def tier_gap_match(campaign_value: Any, playlist_value: Any, max_difference: int) -> bool:
    """Match when two tiers differ by at most `max_difference`."""
    difference = abs(coerce_tier(campaign_value) - coerce_tier(playlist_value))
    return difference <= max_difference
