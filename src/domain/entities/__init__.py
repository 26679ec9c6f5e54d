"""Core domain entities for campaign-to-playlist matching."""

from .campaign import AttributeValue, Campaign
from .pitch import PITCH_STATUSES, Pitch, PitchDraft, PitchStatus
from .playlist import Playlist
from .shared import ensure_utc

__all__ = [
    # Campaign entities
    "AttributeValue",
    "Campaign",
    # Playlist entities
    "Playlist",
    # Pitch entities
    "PITCH_STATUSES",
    "Pitch",
    "PitchDraft",
    "PitchStatus",
    # Shared utilities
    "ensure_utc",
]
