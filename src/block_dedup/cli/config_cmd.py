"""Configuration commands."""

import typer

from ..config.settings import get_settings
from .formatters import console, create_table, print_info

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show the effective default settings."""
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="white")

    table.add_row("Block size", str(settings.block_size))
    table.add_row("Min file size", str(settings.min_file_size))
    table.add_row("Mask", settings.mask)
    table.add_row("Recursive", str(settings.recursive))
    table.add_row("Workers", str(settings.workers))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)
    print_info("Override with BLOCK_DEDUP_<SETTING> environment variables or a .env file")
