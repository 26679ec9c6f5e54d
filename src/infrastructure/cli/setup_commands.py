"""Setup commands for Pitchmatch CLI."""

from rich.console import Console
import typer

from src.config import get_logger, settings
from src.infrastructure.cli.async_helpers import run_async
from src.infrastructure.cli.ui import command_error_handler
from src.infrastructure.persistence.database.db_models import init_db

# Initialize console and logger
console = Console()
logger = get_logger(__name__)


def register_setup_commands(app: typer.Typer) -> None:
    """Register setup commands with the Typer app."""
    app.command(
        name="init",
        help="Initialize the database schema",
        rich_help_panel="⚙️ System",
    )(initialize_database)


@command_error_handler
def initialize_database() -> None:
    """Initialize the database schema based on current models.

    Creates tables that don't yet exist. Existing tables are left untouched.
    """
    with console.status("[bold blue]Initializing database schema...") as status:
        run_async(init_db())

        status.update("[bold green]Database initialization complete!")
        console.print(
            "\n[bold green]✓ Database schema initialized successfully[/bold green]",
        )
        console.print(f"[dim]{settings.database.url}[/dim]")

        console.print("\nNext steps:")
        console.print("  • Run [cyan]pitchmatch data import FILE[/cyan] to load data")
        console.print("  • Run [cyan]pitchmatch settings show[/cyan] to review scoring")
        console.print("  • Run [cyan]pitchmatch match test ID[/cyan] to preview matches")

        logger.info("Database initialization completed successfully")
