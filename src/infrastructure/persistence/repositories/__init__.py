"""Repository layer for database operations with SQLAlchemy 2.0."""

from src.infrastructure.persistence.repositories.base_repo import (
    BaseModelMapper,
    BaseRepository,
    ModelMapper,
)
from src.infrastructure.persistence.repositories.campaign import (
    CampaignMapper,
    CampaignRepository,
)
from src.infrastructure.persistence.repositories.matching_settings import (
    MATCHING_SETTINGS_KEY,
    MatchingSettingsRepository,
)
from src.infrastructure.persistence.repositories.pitch import (
    PitchMapper,
    PitchRepository,
)
from src.infrastructure.persistence.repositories.playlist import (
    PlaylistMapper,
    PlaylistRepository,
)
from src.infrastructure.persistence.repositories.repo_decorator import db_operation

__all__ = [
    "MATCHING_SETTINGS_KEY",
    "BaseModelMapper",
    "BaseRepository",
    "CampaignMapper",
    "CampaignRepository",
    "MatchingSettingsRepository",
    "ModelMapper",
    "PitchMapper",
    "PitchRepository",
    "PlaylistMapper",
    "PlaylistRepository",
    "db_operation",
]
