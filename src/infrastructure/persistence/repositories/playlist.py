"""Playlist catalog repository and domain-persistence mapper."""

from attrs import define
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_logger
from src.domain.entities import Playlist
from src.infrastructure.persistence.database.db_models import DBPlaylist
from src.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
)
from src.infrastructure.persistence.repositories.repo_decorator import db_operation

logger = get_logger(__name__)

_PLAYLIST_COLUMNS = (
    "name",
    "owner",
    "spotify_link",
    "followers",
    "genre",
    "subgenre",
    "language",
    "vocal_type",
    "mood",
    "tempo",
    "era",
    "tier",
)


@define(frozen=True, slots=True)
class PlaylistMapper(BaseModelMapper[DBPlaylist, Playlist]):
    """Bidirectional mapper between playlist entity and table row."""

    @staticmethod
    def to_domain(db_model: DBPlaylist) -> Playlist:
        return Playlist(
            id=db_model.id,
            name=db_model.name or "",
            owner=db_model.owner or "",
            spotify_link=db_model.spotify_link or "",
            followers=db_model.followers or 0,
            genre=db_model.genre,
            subgenre=list(db_model.subgenre or []),
            language=db_model.language,
            vocal_type=db_model.vocal_type,
            mood=list(db_model.mood or []),
            tempo=list(db_model.tempo or []),
            era=list(db_model.era or []),
            tier=db_model.tier,
            metadata=dict(db_model.extra_metadata or {}),
        )

    @staticmethod
    def to_db(domain_model: Playlist) -> DBPlaylist:
        values = {name: getattr(domain_model, name) for name in _PLAYLIST_COLUMNS}
        return DBPlaylist(
            id=domain_model.id,
            extra_metadata=dict(domain_model.metadata),
            **values,
        )


class PlaylistRepository(BaseRepository[DBPlaylist, Playlist]):
    """Repository for the playlist catalog."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DBPlaylist,
            mapper=PlaylistMapper(),
        )

    @db_operation("list_playlists")
    async def list_playlists(self) -> list[Playlist]:
        """List the active catalog in insertion order."""
        db_playlists = await self._fetch_all(
            self.select().order_by(DBPlaylist.created_at, DBPlaylist.id)
        )
        return self.mapper.map_collection(db_playlists)

    @db_operation("get_playlist_by_id")
    async def get_playlist_by_id(self, playlist_id: str) -> Playlist | None:
        """Get playlist by ID, or None if it does not exist."""
        db_playlist = await self._fetch_one(self.select_by_id(playlist_id))
        return self.mapper.to_domain(db_playlist) if db_playlist else None

    @db_operation("save_playlist")
    async def save_playlist(self, playlist: Playlist) -> Playlist:
        """Insert a new playlist or update the existing row with the same ID."""
        existing = await self._fetch_one(self.select_by_id(playlist.id))

        if existing is None:
            db_playlist = self.mapper.to_db(playlist)
            self.session.add(db_playlist)
        else:
            db_playlist = existing
            for name in _PLAYLIST_COLUMNS:
                setattr(db_playlist, name, getattr(playlist, name))
            db_playlist.extra_metadata = dict(playlist.metadata)

        await self.session.flush()
        logger.debug(f"Saved playlist {db_playlist.id}")
        return self.mapper.to_domain(db_playlist)
