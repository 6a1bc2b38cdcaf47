"""Main CLI application."""

import typer
from pydantic import ValidationError

from ..common.constants import EXIT_ERROR
from ..common.logging import setup_logging
from ..config.settings import get_settings
from .config_cmd import config_app
from .formatters import print_error
from .scan_cmd import interactive, scan

app = typer.Typer(
    name="block-dedup",
    help="Find duplicate files by comparing per-block CRC-32 fingerprints",
    add_completion=False,
)

# Register subcommands
app.add_typer(config_app, name="config")

# Add main commands
app.command(name="scan")(scan)
app.command(name="interactive")(interactive)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Block-fingerprint duplicate file finder."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print_error(f"Invalid BLOCK_DEDUP_* setting: {e}")
        raise typer.Exit(EXIT_ERROR)

    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
