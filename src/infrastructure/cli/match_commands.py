"""Matching commands: preview ranked playlists and auto-create pitches."""

import json
from typing import Annotated

from rich.console import Console
import typer

from src.application.use_cases import run_auto_match_for_campaign, run_test_match
from src.config import get_logger
from src.infrastructure.cli.async_helpers import async_command
from src.infrastructure.cli.ui import display_match_results, display_pitches

console = Console()
logger = get_logger(__name__)

app = typer.Typer(help="Match campaigns against the playlist catalog")


@app.command(name="test")
@async_command()
async def test_match(
    campaign_id: Annotated[int, typer.Argument(help="Stored campaign ID")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Number of results to show"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (table, json)"),
    ] = "table",
) -> None:
    """Preview the best playlists for a campaign without creating pitches."""
    result = await run_test_match(campaign_id, limit=limit)

    if not result.success:
        console.print(f"[bold red]✗ {result.message}[/bold red]")
        raise typer.Exit(code=1)

    if output_format == "json":
        console.print_json(
            json.dumps([match.as_dict() for match in result.results], default=str)
        )
        return

    console.print(f"[bold green]✓ {result.message}[/bold green]")
    display_match_results(result.results)


@app.command(name="auto")
@async_command()
async def auto_match(
    campaign_id: Annotated[int, typer.Argument(help="Stored campaign ID")],
) -> None:
    """Create pitches for the top qualifying playlists of a campaign."""
    result = await run_auto_match_for_campaign(campaign_id)
    logger.info(f"Auto-matching result: {result.message}")

    if not result.success:
        console.print(f"[yellow]{result.message}[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"[bold green]✓ {result.message}[/bold green]")
    display_pitches(result.pitches)
