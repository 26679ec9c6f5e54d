"""SQLAlchemy database models for the Pitchmatch reference store.

Campaign, playlist, pitch and matching-settings tables using SQLAlchemy 2.0
typed mappings. Multi-valued descriptive attributes are stored as JSON so the
matching engine sees the same scalar-or-list values it would get from any
other store.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Select,
    String,
    select,
)
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncEngine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.config import get_logger

logger = get_logger(__name__)

# Define naming convention for constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)


class PitchmatchDBBase(AsyncAttrs, DeclarativeBase):
    """Base class for all database models with timestamps and soft delete."""

    metadata = metadata

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, default=None)

    def mark_soft_deleted(self) -> None:
        """Mark record as logically deleted (soft delete)."""
        self.is_deleted = True
        self.deleted_at = datetime.now(UTC)

    @classmethod
    def active_records(cls) -> Select:
        """Return a select statement for non-deleted records."""
        return select(cls).where(cls.is_deleted == False)  # noqa: E712


class DBCampaign(PitchmatchDBBase):
    """Campaign requesting playlist placements for one track."""

    __tablename__ = "campaigns"

    id: Mapped[int] = mapped_column(primary_key=True)
    client_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    track_name: Mapped[str] = mapped_column(String(255), default="")
    track_link: Mapped[str] = mapped_column(String(512), default="")
    campaign_type: Mapped[str] = mapped_column(String(64), default="")
    genre: Mapped[Any] = mapped_column(JSON, nullable=True)
    subgenre: Mapped[Any] = mapped_column(JSON, nullable=True)
    language: Mapped[Any] = mapped_column(JSON, nullable=True)
    vocal_type: Mapped[Any] = mapped_column(JSON, nullable=True)
    mood: Mapped[Any] = mapped_column(JSON, nullable=True)
    tempo: Mapped[Any] = mapped_column(JSON, nullable=True)
    tier: Mapped[float | None] = mapped_column(Float, nullable=True)
    pitches: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(32), default="active")
    extra_metadata: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)


class DBPlaylist(PitchmatchDBBase):
    """Playlist in the matching catalog, keyed by its external ID."""

    __tablename__ = "playlists"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), default="")
    owner: Mapped[str] = mapped_column(String(64), default="", index=True)
    spotify_link: Mapped[str] = mapped_column(String(512), default="")
    followers: Mapped[int] = mapped_column(Integer, default=0)
    genre: Mapped[Any] = mapped_column(JSON, nullable=True)
    subgenre: Mapped[list[str]] = mapped_column(JSON, default=list)
    language: Mapped[Any] = mapped_column(JSON, nullable=True)
    vocal_type: Mapped[Any] = mapped_column(JSON, nullable=True)
    mood: Mapped[list[str]] = mapped_column(JSON, default=list)
    tempo: Mapped[list[str]] = mapped_column(JSON, default=list)
    era: Mapped[list[str]] = mapped_column(JSON, default=list)
    tier: Mapped[float | None] = mapped_column(Float, nullable=True)
    extra_metadata: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)


class DBPitch(PitchmatchDBBase):
    """Outreach record linking a campaign to a playlist."""

    __tablename__ = "pitches"

    id: Mapped[int] = mapped_column(primary_key=True)
    campaign_id: Mapped[int | None] = mapped_column(
        ForeignKey("campaigns.id", ondelete="CASCADE"), nullable=True
    )
    client_id: Mapped[str] = mapped_column(String(64), nullable=False)
    track_link: Mapped[str] = mapped_column(String(512), default="")
    playlist_id: Mapped[str] = mapped_column(
        ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[str] = mapped_column(String(32), default="matched")

    __table_args__ = (
        Index(None, "campaign_id"),
        Index(None, "playlist_id"),
        Index(None, "status"),
    )


class DBMatchingSettings(PitchmatchDBBase):
    """Single-row table holding the serialized matching configuration."""

    __tablename__ = "matching_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    settings_key: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Initialize database schema.

    Creates all tables if they don't exist. Safe to run repeatedly.
    """
    from src.infrastructure.persistence.database.db_connection import get_engine

    engine = engine or get_engine()

    try:
        async with engine.begin() as conn:
            await conn.run_sync(PitchmatchDBBase.metadata.create_all)
        logger.info("Database schema verified - all tables exist")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise
