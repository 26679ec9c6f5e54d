"""Pitchmatch CLI - Main application entry point and app structure."""

from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

from rich.console import Console
import typer

from src.config import get_logger, log_startup_info, settings, setup_loguru_logger
from src.infrastructure.cli import data_commands, match_commands, settings_commands
from src.infrastructure.cli.setup_commands import register_setup_commands

try:
    VERSION = version("pitchmatch")
except PackageNotFoundError:
    VERSION = "0.0.0"

# Initialize console and logger with reasonable width
console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"🎯 Pitchmatch v{VERSION} - Match campaigns to playlists",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

app.add_typer(
    match_commands.app,
    name="match",
    help="Preview matches and create pitches",
    rich_help_panel="🎯 Matching",
)

app.add_typer(
    settings_commands.app,
    name="settings",
    help="Inspect and change the matching configuration",
    rich_help_panel="🎯 Matching",
)

app.add_typer(
    data_commands.app,
    name="data",
    help="Load and inspect campaigns, playlists and pitches",
    rich_help_panel="📊 Data",
)

register_setup_commands(app)


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]🎯 Pitchmatch[/bold bright_blue] [dim]v{VERSION}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
    database: Annotated[
        str | None,
        typer.Option("--database", "-d", help="Database URL to use instead of the configured one"),
    ] = None,
) -> None:
    """Initialize Pitchmatch CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    # Setup logging first
    setup_loguru_logger(verbose)
    if verbose:
        log_startup_info()

    if database:
        settings.database.url = database
        logger.debug(f"Using database {database}")

    settings.data_dir.mkdir(parents=True, exist_ok=True)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
