"""Campaign domain entity.

A campaign is a request to promote one track. The matching engine only reads
it through dotted field paths, so every descriptive field may hold either a
scalar or a list of values.
"""

from typing import Any

from attrs import define, field, validators

# Descriptive values are free-form: a single label or several
AttributeValue = str | list[str] | None


@define(frozen=True, slots=True)
class Campaign:
    """Marketing request describing a track and its target playlist profile.

    `pitches` is the number of playlist placements requested; the auto-pitch
    orchestrator creates at most that many pitch records.
    """

    campaign_id: int | None = field(default=None)
    client_id: str = field(default="")
    track_name: str = field(default="")
    track_link: str = field(default="")
    campaign_type: str = field(default="")

    # Matchable attributes
    genre: AttributeValue = field(default=None)
    subgenre: AttributeValue = field(default=None)
    language: AttributeValue = field(default=None)
    vocal_type: AttributeValue = field(default=None)
    mood: AttributeValue = field(default=None)
    tempo: AttributeValue = field(default=None)
    tier: int | float | None = field(default=None)

    pitches: int = field(default=0, validator=validators.instance_of(int))
    status: str = field(default="active")

    # Arbitrary extra fields, addressable as "metadata.<key>"
    metadata: dict[str, Any] = field(factory=dict)

    def with_id(self, campaign_id: int) -> "Campaign":
        """Create a copy carrying the given store-assigned ID."""
        if not isinstance(campaign_id, int) or campaign_id <= 0:
            raise ValueError(
                f"Invalid campaign ID: {campaign_id}. Must be a positive integer.",
            )
        return self.__class__(
            campaign_id=campaign_id,
            client_id=self.client_id,
            track_name=self.track_name,
            track_link=self.track_link,
            campaign_type=self.campaign_type,
            genre=self.genre,
            subgenre=self.subgenre,
            language=self.language,
            vocal_type=self.vocal_type,
            mood=self.mood,
            tempo=self.tempo,
            tier=self.tier,
            pitches=self.pitches,
            status=self.status,
            metadata=self.metadata.copy(),
        )

    @property
    def display_name(self) -> str:
        """Human label used in listings."""
        return self.track_name or f"Campaign #{self.campaign_id}"
