"""UI helpers for CLI interaction.

Reusable Rich renderers and the command error handler, keeping presentation
logic separate from the matching use cases.
"""

from collections.abc import Callable, Sequence
import functools
from typing import Any, ParamSpec, TypeVar

from rich.console import Console
from rich.table import Table
import typer

from src.config import get_logger, settings
from src.domain.entities import Campaign, Pitch, Playlist
from src.domain.matching import (
    AttributeDefinition,
    MatchingConfiguration,
    MatchResult,
    TierGapAttribute,
)

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    Logs the failure with its traceback, prints a short message and converts
    the error into a non-zero typer exit.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def _format_value(value: Any) -> str:
    """Render a scalar-or-list attribute value for a table cell."""
    if value is None:
        return "[dim]-[/dim]"
    if isinstance(value, list | tuple | set | frozenset):
        return ", ".join(str(item) for item in value) or "[dim]-[/dim]"
    return str(value)


def _attribute_row(attribute: AttributeDefinition, group: str) -> list[str]:
    rule = (
        f"tier gap ≤ {attribute.max_difference}"
        if isinstance(attribute, TierGapAttribute)
        else "equality / overlap"
    )
    return [
        attribute.id,
        attribute.name,
        str(attribute.points),
        "[bold green]yes[/bold green]" if attribute.required else "no",
        f"{attribute.source_campaign_field} → {attribute.source_playlist_field}",
        rule,
        group,
    ]


def display_configuration(configuration: MatchingConfiguration) -> None:
    """Show the matching configuration, primary attributes first."""
    count = settings.matching.primary_attribute_count

    table = Table(title="Matching Attributes", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Points", justify="right")
    table.add_column("Required", justify="center")
    table.add_column("Fields", style="dim")
    table.add_column("Rule")
    table.add_column("Group", style="magenta")

    for attribute in configuration.primary_attributes(count):
        table.add_row(*_attribute_row(attribute, "primary"))
    for attribute in configuration.secondary_attributes(count):
        table.add_row(*_attribute_row(attribute, "secondary"))

    console.print(table)
    console.print(
        f"[bold]Total possible points:[/bold] {configuration.total_points}"
    )


def display_match_results(results: Sequence[MatchResult]) -> None:
    """Show ranked match results with their per-attribute breakdown."""
    table = Table(title="Match Results", show_header=True, show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Playlist", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("%", justify="right")
    table.add_column("Required", justify="center")
    table.add_column("Breakdown")

    for rank, result in enumerate(results, start=1):
        breakdown = "\n".join(
            f"{'[green]✓[/green]' if outcome.matched else '[red]✗[/red]'} "
            f"{outcome.attribute_name} ({outcome.points})"
            for outcome in result.breakdown
        )
        table.add_row(
            str(rank),
            result.playlist.name or result.playlist.id,
            f"{result.score}/{result.total_possible_points}",
            f"{result.percentage:.0f}",
            "[green]pass[/green]" if result.passes_required else "[red]fail[/red]",
            breakdown,
        )

    console.print(table)


def display_campaigns(campaigns: Sequence[Campaign]) -> None:
    """Show stored campaigns."""
    table = Table(title="Campaigns", show_header=True)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Track", style="green")
    table.add_column("Client")
    table.add_column("Genre")
    table.add_column("Language")
    table.add_column("Tier", justify="right")
    table.add_column("Pitches", justify="right")
    table.add_column("Status")

    for campaign in campaigns:
        table.add_row(
            str(campaign.campaign_id),
            campaign.display_name,
            campaign.client_id,
            _format_value(campaign.genre),
            _format_value(campaign.language),
            _format_value(campaign.tier),
            str(campaign.pitches),
            campaign.status,
        )

    console.print(table)


def display_playlists(playlists: Sequence[Playlist]) -> None:
    """Show the playlist catalog."""
    table = Table(title="Playlists", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Followers", justify="right")
    table.add_column("Genre")
    table.add_column("Mood")
    table.add_column("Tier", justify="right")

    for playlist in playlists:
        table.add_row(
            playlist.id,
            playlist.name,
            f"{playlist.followers:,}",
            _format_value(playlist.genre),
            _format_value(playlist.mood),
            _format_value(playlist.tier),
        )

    console.print(table)


def display_pitches(pitches: Sequence[Pitch]) -> None:
    """Show pitch records."""
    table = Table(title="Pitches", show_header=True)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Campaign", justify="right")
    table.add_column("Playlist", style="green")
    table.add_column("Status")
    table.add_column("Created", style="dim")

    for pitch in pitches:
        table.add_row(
            str(pitch.pitch_id),
            str(pitch.campaign_id),
            pitch.playlist_id,
            pitch.status,
            pitch.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)
