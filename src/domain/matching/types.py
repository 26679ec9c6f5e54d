"""Pure domain types for campaign-to-playlist matching.

These types describe the attribute configuration the scoring algorithm runs
against and the results it produces. They depend on nothing but attrs.
"""

from typing import Any

from attrs import define, field, validators

from .predicates import tier_gap_match, values_match


def _non_negative(instance: Any, attribute: Any, value: int) -> None:
    if value < 0:
        raise ValueError(f"{attribute.name} must be non-negative, got {value}")


@define(frozen=True, slots=True)
class AttributeDefinition:
    """One comparable dimension of a campaign and a playlist.

    Values are read from `source_campaign_field` on the campaign and
    `source_playlist_field` on the playlist (dotted paths), and compared with
    the standard equality/overlap predicate.
    """

    id: str = field(validator=validators.instance_of(str))
    name: str
    required: bool = False
    points: int = field(default=0, validator=[validators.instance_of(int), _non_negative])
    source_campaign_field: str = ""
    source_playlist_field: str = ""

    def matches(self, campaign_value: Any, playlist_value: Any) -> bool:
        """Apply this attribute's match predicate to two resolved values."""
        return values_match(campaign_value, playlist_value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the stored settings wire shape."""
        return {
            "id": self.id,
            "name": self.name,
            "required": self.required,
            "points": self.points,
            "sourceCampaign": self.source_campaign_field,
            "sourcePlaylist": self.source_playlist_field,
        }


@define(frozen=True, slots=True)
class TierGapAttribute(AttributeDefinition):
    """Attribute compared by numeric tolerance instead of equality.

    Matches when the two tier values differ by at most `max_difference`.
    Points and the required flag behave exactly as for a standard attribute.
    """

    max_difference: int = field(
        default=0, validator=[validators.instance_of(int), _non_negative]
    )

    def matches(self, campaign_value: Any, playlist_value: Any) -> bool:
        """Compare tiers numerically within `max_difference`."""
        return tier_gap_match(campaign_value, playlist_value, self.max_difference)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the stored settings wire shape."""
        data = super().to_dict()
        data["maxDifference"] = self.max_difference
        return data


def attribute_from_dict(data: dict[str, Any]) -> AttributeDefinition:
    """Build an attribute from its stored wire shape.

    An entry carrying "maxDifference" becomes a TierGapAttribute.

    Raises:
        ValueError: If a mandatory key is missing or a value is invalid
    """
    if not isinstance(data, dict):
        raise ValueError(f"Matching attribute must be a mapping, got {data!r}")

    try:
        common = {
            "id": data["id"],
            "name": data.get("name", data["id"]),
            "required": bool(data.get("required", False)),
            "points": int(data.get("points", 0)),
            "source_campaign_field": data.get("sourceCampaign", ""),
            "source_playlist_field": data.get("sourcePlaylist", ""),
        }
        if "maxDifference" in data:
            return TierGapAttribute(max_difference=int(data["maxDifference"]), **common)
        return AttributeDefinition(**common)
    except KeyError as e:
        raise ValueError(f"Matching attribute is missing key {e}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid matching attribute {data!r}: {e}") from e


def _unique_ids(
    instance: Any, attribute: Any, value: tuple[AttributeDefinition, ...]
) -> None:
    seen: set[str] = set()
    for definition in value:
        if definition.id in seen:
            raise ValueError(f"Duplicate matching attribute id: {definition.id!r}")
        seen.add(definition.id)


@define(frozen=True, slots=True)
class MatchingConfiguration:
    """Ordered list of attributes a ranking run scores against.

    Order does not change scores; it only drives display grouping, where the
    leading attributes are shown as "primary" and the rest as "secondary".
    """

    attributes: tuple[AttributeDefinition, ...] = field(
        converter=tuple, validator=_unique_ids
    )

    @property
    def total_points(self) -> int:
        """Maximum score obtainable under this configuration."""
        return sum(attribute.points for attribute in self.attributes)

    def primary_attributes(self, count: int = 4) -> tuple[AttributeDefinition, ...]:
        """Leading attributes shown in the primary group."""
        return self.attributes[:count]

    def secondary_attributes(self, count: int = 4) -> tuple[AttributeDefinition, ...]:
        """Remaining attributes shown in the secondary group."""
        return self.attributes[count:]

    def get_attribute(self, attribute_id: str) -> AttributeDefinition | None:
        """Look up an attribute by id."""
        return next((a for a in self.attributes if a.id == attribute_id), None)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored settings wire shape."""
        return {"attributes": [attribute.to_dict() for attribute in self.attributes]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchingConfiguration":
        """Parse the stored settings wire shape.

        Raises:
            ValueError: If the payload is malformed
        """
        if not isinstance(data, dict) or not isinstance(data.get("attributes"), list):
            raise ValueError("Matching settings must contain an 'attributes' list")
        return cls(attributes=[attribute_from_dict(item) for item in data["attributes"]])


@define(frozen=True, slots=True)
class AttributeOutcome:
    """How one attribute contributed to a playlist's score."""

    attribute_id: str
    attribute_name: str
    points: int
    matched: bool
    required: bool
    campaign_value: Any = None
    playlist_value: Any = None

    @property
    def failed_required(self) -> bool:
        return self.required and not self.matched

    def as_dict(self) -> dict[str, Any]:
        return {
            "attribute_id": self.attribute_id,
            "attribute_name": self.attribute_name,
            "points": self.points,
            "matched": self.matched,
            "required": self.required,
            "campaign_value": self.campaign_value,
            "playlist_value": self.playlist_value,
        }


@define(frozen=True, slots=True)
class MatchResult:
    """Score of one playlist against one campaign, with its breakdown.

    `total_possible_points` is the configuration's theoretical maximum and does
    not shrink when a required attribute fails, so percentages stay comparable
    across playlists scored with the same configuration.
    """

    playlist: Any  # Playlist entity, or any record the resolver can walk
    score: int
    breakdown: tuple[AttributeOutcome, ...] = field(converter=tuple, factory=tuple)
    total_possible_points: int = 0

    @property
    def passes_required(self) -> bool:
        """True when every required attribute matched."""
        return not any(outcome.failed_required for outcome in self.breakdown)

    @property
    def percentage(self) -> float:
        """Score as a percentage of the configuration maximum."""
        if not self.total_possible_points:
            return 0.0
        return self.score / self.total_possible_points * 100

    def as_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for display or JSON output."""
        return {
            "playlist_id": getattr(self.playlist, "id", None),
            "score": self.score,
            "total_possible_points": self.total_possible_points,
            "percentage": round(self.percentage, 1),
            "passes_required": self.passes_required,
            "breakdown": [outcome.as_dict() for outcome in self.breakdown],
        }
