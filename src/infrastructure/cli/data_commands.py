"""Data commands for loading and listing campaigns, playlists and pitches."""

from enum import StrEnum
import json
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.panel import Panel
import typer

from src.application.use_cases import run_import_catalog
from src.infrastructure.cli.async_helpers import async_command
from src.infrastructure.cli.ui import (
    display_campaigns,
    display_pitches,
    display_playlists,
)
from src.infrastructure.persistence.database.db_connection import get_session
from src.infrastructure.persistence.repositories.factories import get_unit_of_work

console = Console()


class DataKind(StrEnum):
    """Record kinds that can be listed."""

    CAMPAIGNS = "campaigns"
    PLAYLISTS = "playlists"
    PITCHES = "pitches"


app = typer.Typer(help="Load and inspect campaigns, playlists and pitches")


@app.command(name="import")
@async_command()
async def import_data(
    file_path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="JSON file to import"),
    ],
) -> None:
    """Import playlists, campaigns and matching settings from a JSON file.

    Campaigns requesting pitches are auto-matched against the catalog as they
    are created.
    """
    document = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(document, dict):
        console.print("[bold red]✗ Import file must contain a JSON object[/bold red]")
        raise typer.Exit(code=1)

    summary = await run_import_catalog(document)

    console.print(
        Panel(
            f"Playlists: [bold]{summary.playlists}[/bold]\n"
            f"Campaigns: [bold]{summary.campaigns}[/bold]\n"
            f"Pitches created: [bold]{summary.pitches}[/bold]\n"
            f"Matching settings saved: {'yes' if summary.settings_saved else 'no'}",
            title="[bold]Import Complete[/bold]",
            border_style="green" if not summary.errors else "yellow",
            expand=False,
        )
    )
    for error in summary.errors:
        console.print(f"[yellow]• {error}[/yellow]")


@app.command(name="list")
@async_command()
async def list_data(
    kind: Annotated[DataKind, typer.Argument(help="What to list")],
    campaign_id: Annotated[
        int | None,
        typer.Option("--campaign", "-c", help="Only pitches of this campaign"),
    ] = None,
) -> None:
    """List stored records."""
    async with get_session() as session:
        uow = get_unit_of_work(session)
        match kind:
            case DataKind.CAMPAIGNS:
                campaigns = await uow.get_campaign_repository().list_campaigns()
                display_campaigns(campaigns)
            case DataKind.PLAYLISTS:
                playlists = await uow.get_playlist_repository().list_playlists()
                display_playlists(playlists)
            case DataKind.PITCHES:
                pitch_repo = uow.get_pitch_repository()
                pitches = (
                    await pitch_repo.get_pitches_by_campaign(campaign_id)
                    if campaign_id is not None
                    else await pitch_repo.list_pitches()
                )
                display_pitches(pitches)
