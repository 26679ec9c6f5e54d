"""Pitch domain entities.

A pitch links one campaign to one playlist. The matching engine only ever
asks for pitches to be created; IDs and timestamps are assigned by the store.
"""

from datetime import UTC, datetime
from typing import Literal

from attrs import define, field, validators

PitchStatus = Literal["matched", "pitched", "accepted", "declined", "expired"]

PITCH_STATUSES: tuple[str, ...] = (
    "matched",
    "pitched",
    "accepted",
    "declined",
    "expired",
)


@define(frozen=True, slots=True)
class PitchDraft:
    """Creation request for a pitch, before the store assigns identity."""

    campaign_id: int | None
    client_id: str
    track_link: str
    playlist_id: str
    status: PitchStatus = field(
        default="matched", validator=validators.in_(PITCH_STATUSES)
    )


@define(frozen=True, slots=True)
class Pitch:
    """Persisted outreach record linking a campaign to a playlist."""

    pitch_id: int
    campaign_id: int | None
    client_id: str
    track_link: str
    playlist_id: str
    status: PitchStatus = field(
        default="matched", validator=validators.in_(PITCH_STATUSES)
    )
    created_at: datetime = field(factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(factory=lambda: datetime.now(UTC))

    @classmethod
    def from_draft(
        cls,
        draft: PitchDraft,
        pitch_id: int,
        created_at: datetime | None = None,
    ) -> "Pitch":
        """Build a persisted pitch from its draft and store-assigned values."""
        timestamp = created_at or datetime.now(UTC)
        return cls(
            pitch_id=pitch_id,
            campaign_id=draft.campaign_id,
            client_id=draft.client_id,
            track_link=draft.track_link,
            playlist_id=draft.playlist_id,
            status=draft.status,
            created_at=timestamp,
            updated_at=timestamp,
        )
