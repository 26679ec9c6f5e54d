"""Application use cases - orchestrate matching operations."""

from .auto_match_campaign import (
    AutoMatchCampaignCommand,
    AutoMatchCampaignUseCase,
    AutoMatchResult,
    run_auto_match_for_campaign,
)
from .create_campaign import CreateCampaignResult, CreateCampaignUseCase
from .import_catalog import (
    ImportCatalogCommand,
    ImportCatalogUseCase,
    ImportSummary,
    campaign_from_record,
    playlist_from_record,
    run_import_catalog,
)
from .match_campaign import MatchCampaignCommand, MatchCampaignUseCase
from .run_test_match import (
    MatchPreviewResult,
    RunTestMatchCommand,
    RunTestMatchUseCase,
    run_test_match,
)

__all__ = [
    "AutoMatchCampaignCommand",
    "AutoMatchCampaignUseCase",
    "AutoMatchResult",
    "CreateCampaignResult",
    "CreateCampaignUseCase",
    "ImportCatalogCommand",
    "ImportCatalogUseCase",
    "ImportSummary",
    "MatchCampaignCommand",
    "MatchCampaignUseCase",
    "MatchPreviewResult",
    "RunTestMatchCommand",
    "RunTestMatchUseCase",
    "campaign_from_record",
    "playlist_from_record",
    "run_auto_match_for_campaign",
    "run_import_catalog",
    "run_test_match",
]
