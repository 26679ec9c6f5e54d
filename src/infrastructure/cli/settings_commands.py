"""Matching settings commands."""

import json
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.table import Table
import typer

from src.application.services import MatchingSettingsService
from src.domain.matching import MatchingConfiguration
from src.infrastructure.cli.async_helpers import async_command
from src.infrastructure.cli.ui import display_configuration
from src.infrastructure.persistence.database.db_connection import get_session
from src.infrastructure.persistence.repositories.factories import (
    get_matching_settings_repository,
)

console = Console()

app = typer.Typer(help="Inspect and change the matching configuration")


@app.command(name="show")
@async_command()
async def show_settings() -> None:
    """Show the active matching configuration."""
    async with get_session() as session:
        service = MatchingSettingsService(get_matching_settings_repository(session))
        configuration = await service.get_matching_settings()

    display_configuration(configuration)


@app.command(name="load")
@async_command()
async def load_settings(
    file_path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="JSON configuration file"),
    ],
) -> None:
    """Replace the stored configuration with one read from a JSON file."""
    configuration = MatchingConfiguration.from_dict(
        json.loads(file_path.read_text(encoding="utf-8"))
    )

    async with get_session() as session:
        service = MatchingSettingsService(get_matching_settings_repository(session))
        result = await service.save_matching_settings(configuration)

    if not result.success:
        console.print(f"[bold red]✗ {result.message}[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]✓ {result.message}[/bold green]")


@app.command(name="reset")
@async_command()
async def reset_settings() -> None:
    """Discard the stored configuration and return to the defaults."""
    async with get_session() as session:
        service = MatchingSettingsService(get_matching_settings_repository(session))
        result = await service.reset_matching_settings()

    if not result.success:
        console.print(f"[bold red]✗ {result.message}[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]✓ {result.message}[/bold green]")


@app.command(name="fields")
def list_fields() -> None:
    """List the field paths available as attribute sources."""
    campaign_fields = MatchingSettingsService.get_campaign_fields()
    playlist_fields = MatchingSettingsService.get_playlist_fields()

    table = Table(title="Attribute Source Fields", show_header=True)
    table.add_column("Campaign", style="cyan")
    table.add_column("Playlist", style="green")

    for index in range(max(len(campaign_fields), len(playlist_fields))):
        table.add_row(
            campaign_fields[index] if index < len(campaign_fields) else "",
            playlist_fields[index] if index < len(playlist_fields) else "",
        )

    console.print(table)
    console.print("[dim]Nested metadata is addressable as metadata.<key>[/dim]")
