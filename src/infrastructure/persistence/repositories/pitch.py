"""Pitch repository and domain-persistence mapper.

Pitch creation reports failure as None instead of raising, so the
auto-pitch orchestrator can skip one failed creation and continue.
"""

from attrs import define
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_logger
from src.domain.entities import Pitch, PitchDraft, ensure_utc
from src.infrastructure.persistence.database.db_connection import transaction
from src.infrastructure.persistence.database.db_models import DBPitch
from src.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
)
from src.infrastructure.persistence.repositories.repo_decorator import db_operation

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class PitchMapper(BaseModelMapper[DBPitch, Pitch]):
    """Bidirectional mapper between pitch entity and table row."""

    @staticmethod
    def to_domain(db_model: DBPitch) -> Pitch:
        return Pitch(
            pitch_id=db_model.id,
            campaign_id=db_model.campaign_id,
            client_id=db_model.client_id,
            track_link=db_model.track_link or "",
            playlist_id=db_model.playlist_id,
            status=db_model.status,
            created_at=ensure_utc(db_model.created_at),
            updated_at=ensure_utc(db_model.updated_at),
        )

    @staticmethod
    def to_db(domain_model: PitchDraft) -> DBPitch:
        return DBPitch(
            campaign_id=domain_model.campaign_id,
            client_id=domain_model.client_id,
            track_link=domain_model.track_link,
            playlist_id=domain_model.playlist_id,
            status=domain_model.status,
        )


class PitchRepository(BaseRepository[DBPitch, Pitch]):
    """Repository for pitch records."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DBPitch,
            mapper=PitchMapper(),
        )

    async def create_pitch(self, draft: PitchDraft) -> Pitch | None:
        """Create one pitch inside a savepoint.

        Returns:
            The stored pitch, or None when the insert failed. A failure rolls
            back only this pitch's savepoint.
        """
        db_pitch = self.mapper.to_db(draft)
        try:
            async with transaction(self.session):
                self.session.add(db_pitch)
                await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(
                f"Error creating pitch for campaign {draft.campaign_id} "
                f"and playlist {draft.playlist_id}: {e}"
            )
            return None

        logger.debug(f"Created pitch {db_pitch.id} for playlist {draft.playlist_id}")
        return Pitch.from_draft(draft, db_pitch.id, ensure_utc(db_pitch.created_at))

    @db_operation("get_pitches_by_campaign")
    async def get_pitches_by_campaign(self, campaign_id: int) -> list[Pitch]:
        """Get all pitches for a campaign, oldest first."""
        db_pitches = await self._fetch_all(
            self.select().where(DBPitch.campaign_id == campaign_id).order_by(DBPitch.id)
        )
        return self.mapper.map_collection(db_pitches)

    @db_operation("list_pitches")
    async def list_pitches(self) -> list[Pitch]:
        """List every pitch, oldest first."""
        db_pitches = await self._fetch_all(self.select().order_by(DBPitch.id))
        return self.mapper.map_collection(db_pitches)
