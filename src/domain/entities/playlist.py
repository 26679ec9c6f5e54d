"""Playlist domain entity.

Pure playlist representation with zero external dependencies beyond attrs.
"""

from typing import Any

from attrs import define, field, validators


@define(frozen=True, slots=True)
class Playlist:
    """A curated playlist that campaigns are matched against.

    Playlists describe their audience with the same vocabulary campaigns use
    (genre, language, vocal type, mood, tempo) plus a numeric tier. Multi-valued
    attributes are stored as lists so a playlist can cover several moods or
    tempos at once.
    """

    id: str = field(validator=validators.instance_of(str))
    name: str = field(default="")
    owner: str = field(default="")
    spotify_link: str = field(default="")
    followers: int = field(default=0)

    # Matchable attributes
    genre: str | list[str] | None = field(default=None)
    subgenre: list[str] = field(factory=list)
    language: str | list[str] | None = field(default=None)
    vocal_type: str | list[str] | None = field(default=None)
    mood: list[str] = field(factory=list)
    tempo: list[str] = field(factory=list)
    era: list[str] = field(factory=list)
    tier: int | float | None = field(default=None)

    # Arbitrary extra fields, addressable as "metadata.<key>"
    metadata: dict[str, Any] = field(factory=dict)
