"""Campaign repository and domain-persistence mapper."""

from attrs import define
from sqlalchemy.ext.asyncio import AsyncSession

from src.config import get_logger
from src.domain.entities import Campaign
from src.infrastructure.persistence.database.db_models import DBCampaign
from src.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
)
from src.infrastructure.persistence.repositories.repo_decorator import db_operation

logger = get_logger(__name__)

# Columns copied one-to-one between entity and table
_CAMPAIGN_COLUMNS = (
    "client_id",
    "track_name",
    "track_link",
    "campaign_type",
    "genre",
    "subgenre",
    "language",
    "vocal_type",
    "mood",
    "tempo",
    "tier",
    "pitches",
    "status",
)


@define(frozen=True, slots=True)
class CampaignMapper(BaseModelMapper[DBCampaign, Campaign]):
    """Bidirectional mapper between campaign entity and table row."""

    @staticmethod
    def to_domain(db_model: DBCampaign) -> Campaign:
        return Campaign(
            campaign_id=db_model.id,
            client_id=db_model.client_id,
            track_name=db_model.track_name or "",
            track_link=db_model.track_link or "",
            campaign_type=db_model.campaign_type or "",
            genre=db_model.genre,
            subgenre=db_model.subgenre,
            language=db_model.language,
            vocal_type=db_model.vocal_type,
            mood=db_model.mood,
            tempo=db_model.tempo,
            tier=db_model.tier,
            pitches=db_model.pitches or 0,
            status=db_model.status or "active",
            metadata=dict(db_model.extra_metadata or {}),
        )

    @staticmethod
    def to_db(domain_model: Campaign) -> DBCampaign:
        values = {name: getattr(domain_model, name) for name in _CAMPAIGN_COLUMNS}
        return DBCampaign(
            id=domain_model.campaign_id,
            extra_metadata=dict(domain_model.metadata),
            **values,
        )


class CampaignRepository(BaseRepository[DBCampaign, Campaign]):
    """Repository for campaign records."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session=session,
            model_class=DBCampaign,
            mapper=CampaignMapper(),
        )

    @db_operation("get_campaign_by_id")
    async def get_campaign_by_id(self, campaign_id: int) -> Campaign | None:
        """Get campaign by ID, or None if it does not exist."""
        db_campaign = await self._fetch_one(self.select_by_id(campaign_id))
        return self.mapper.to_domain(db_campaign) if db_campaign else None

    @db_operation("list_campaigns")
    async def list_campaigns(self) -> list[Campaign]:
        """List every active campaign ordered by ID."""
        db_campaigns = await self._fetch_all(self.select().order_by(DBCampaign.id))
        return self.mapper.map_collection(db_campaigns)

    @db_operation("save_campaign")
    async def save_campaign(self, campaign: Campaign) -> Campaign:
        """Insert a new campaign or update an existing one."""
        existing = None
        if campaign.campaign_id is not None:
            existing = await self._fetch_one(self.select_by_id(campaign.campaign_id))

        if existing is None:
            db_campaign = self.mapper.to_db(campaign)
            self.session.add(db_campaign)
            await self.session.flush()
            logger.debug(f"Created campaign {db_campaign.id}")
            return campaign.with_id(db_campaign.id)

        for name in _CAMPAIGN_COLUMNS:
            setattr(existing, name, getattr(campaign, name))
        existing.extra_metadata = dict(campaign.metadata)

        await self.session.flush()
        logger.debug(f"Updated campaign {existing.id}")
        return self.mapper.to_domain(existing)
