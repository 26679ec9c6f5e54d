"""Import catalog use case: load playlists and campaigns from a JSON document.

The document shape is::

    {
        "playlists": [{"id": "pl-1", "name": "...", "genre": "Pop", ...}],
        "campaigns": [{"client_id": "c-1", "track_name": "...", "pitches": 3, ...}],
        "matching_settings": {"attributes": [...]}
    }

Every section is optional. Keys that are not entity fields are kept in the
entity's `metadata`, where `metadata.<key>` attribute paths can reach them.
Playlists are imported first so new campaigns auto-match against them.
"""

from typing import Any

from attrs import define, field, fields

from src.application.services.matching_settings_service import (
    MatchingSettingsService,
)
from src.config import get_logger, resilient_operation
from src.domain.entities import Campaign, Playlist
from src.domain.matching import MatchingConfiguration
from src.domain.repositories import UnitOfWorkProtocol

from .create_campaign import CreateCampaignUseCase

logger = get_logger(__name__)


def _split_record(entity_cls: type, record: dict[str, Any]) -> dict[str, Any]:
    """Separate entity fields from extras, folding extras into metadata."""
    if not isinstance(record, dict):
        raise ValueError(f"Expected an object, got {type(record).__name__}")

    known = {f.name for f in fields(entity_cls)}
    values = {key: value for key, value in record.items() if key in known}
    extras = {key: value for key, value in record.items() if key not in known}
    if extras:
        values["metadata"] = {**values.get("metadata", {}), **extras}
    return values


def campaign_from_record(record: dict[str, Any]) -> Campaign:
    """Build a campaign from a JSON object."""
    values = _split_record(Campaign, record)
    values.pop("campaign_id", None)
    values["pitches"] = int(values.get("pitches") or 0)
    return Campaign(**values)


def playlist_from_record(record: dict[str, Any]) -> Playlist:
    """Build a playlist from a JSON object."""
    values = _split_record(Playlist, record)
    values["id"] = str(values.get("id") or "")
    if not values["id"]:
        raise ValueError("Playlist record is missing an id")
    return Playlist(**values)


@define(slots=True)
class ImportSummary:
    """Counts of what an import stored, plus per-record problems."""

    playlists: int = 0
    campaigns: int = 0
    pitches: int = 0
    settings_saved: bool = False
    errors: list[str] = field(factory=list)


@define(frozen=True, slots=True)
class ImportCatalogCommand:
    """Command carrying a parsed JSON import document."""

    document: dict[str, Any]


@define(slots=True)
class ImportCatalogUseCase:
    """Store playlists, settings and campaigns from one import document.

    Invalid records are reported in the summary and skipped; valid ones are
    still imported.
    """

    async def execute(
        self,
        command: ImportCatalogCommand,
        uow: UnitOfWorkProtocol,
    ) -> ImportSummary:
        summary = ImportSummary()
        document = command.document

        async with uow:
            playlist_repo = uow.get_playlist_repository()
            for index, record in enumerate(document.get("playlists") or []):
                try:
                    playlist = playlist_from_record(record)
                except (TypeError, ValueError) as e:
                    summary.errors.append(f"playlists[{index}]: {e}")
                    continue
                await playlist_repo.save_playlist(playlist)
                summary.playlists += 1

            if "matching_settings" in document:
                try:
                    configuration = MatchingConfiguration.from_dict(
                        document["matching_settings"]
                    )
                except ValueError as e:
                    summary.errors.append(f"matching_settings: {e}")
                else:
                    service = MatchingSettingsService(
                        uow.get_matching_settings_repository()
                    )
                    result = await service.save_matching_settings(configuration)
                    summary.settings_saved = result.success

        create_campaign = CreateCampaignUseCase()
        for index, record in enumerate(document.get("campaigns") or []):
            try:
                campaign = campaign_from_record(record)
            except (TypeError, ValueError) as e:
                summary.errors.append(f"campaigns[{index}]: {e}")
                continue

            result = await create_campaign.execute(campaign, uow)
            if not result.success:
                summary.errors.append(f"campaigns[{index}]: {result.message}")
                continue

            summary.campaigns += 1
            if result.auto_match is not None:
                summary.pitches += result.auto_match.pitch_count

        logger.info(
            f"Imported {summary.playlists} playlists and {summary.campaigns} "
            f"campaigns ({summary.pitches} pitches, {len(summary.errors)} errors)"
        )
        return summary


@resilient_operation("import_catalog")
async def run_import_catalog(document: dict[str, Any]) -> ImportSummary:
    """Import a catalog document into the reference database (convenience function)."""
    from src.infrastructure.persistence.database.db_connection import get_session
    from src.infrastructure.persistence.repositories.factories import get_unit_of_work

    async with get_session() as session:
        uow = get_unit_of_work(session)
        return await ImportCatalogUseCase().execute(
            ImportCatalogCommand(document=document), uow
        )
