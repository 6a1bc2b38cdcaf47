"""Rich formatting utilities for terminal output."""

from typing import Any, Optional

from humanize import naturalsize
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from ..detector.models import DuplicateGroup, FileFailure, ScanResult

console = Console()


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_panel(title: str, content: str, style: str = "blue") -> None:
    """Print content in a panel.

    Args:
        title: Panel title
        content: Panel content
        style: Panel border style
    """
    console.print(Panel(content, title=title, border_style=style))


def create_progress() -> Progress:
    """Create a progress bar with common columns.

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """Create a Rich table with common styling.

    Args:
        title: Optional table title
        **kwargs: Additional Table arguments

    Returns:
        Configured Table instance
    """
    return Table(title=title, show_header=True, header_style="bold cyan", **kwargs)


def print_group(group: DuplicateGroup) -> None:
    """Print one duplicate group with its paths in order."""
    table = create_table(
        title=(
            f"Group {group.group_id}: {group.count} files, "
            f"{naturalsize(group.size)} each"
        ),
        title_justify="left",
    )
    table.add_column("#", style="cyan", width=4)
    table.add_column("Path", style="green")

    for index, path in enumerate(group.paths, start=1):
        table.add_row(str(index), path)

    console.print(table)


def print_failures(failures: list[FileFailure]) -> None:
    """Print per-file failures, one line per path."""
    for failure in failures:
        print_warning(f"{failure.path}: {failure.message}")


def print_summary(result: ScanResult) -> None:
    """Print the scan summary panel."""
    summary_text = f"""
Entries seen: {result.entries_seen:,}
Files fingerprinted: {result.candidates:,}
Duplicate groups: {len(result.groups):,}
Duplicate files: {result.duplicate_files:,}
Wasted space: {naturalsize(result.wasted_size)}
Failures: {len(result.failures):,}
"""
    if result.partial:
        print_panel("Partial Scan Summary (cancelled)", summary_text.strip(), style="yellow")
    else:
        print_panel("Scan Summary", summary_text.strip(), style="green")
