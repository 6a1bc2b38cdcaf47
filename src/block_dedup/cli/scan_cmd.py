"""Scan and interactive commands."""

import threading
from pathlib import Path
from typing import List, Optional

import typer

from ..common.constants import EXIT_CANCELLED, EXIT_ERROR
from ..common.exceptions import ConfigError
from ..common.logging import get_logger
from ..config.scan_config import ScanConfig
from ..config.settings import get_settings
from ..detector.models import ScanResult
from ..detector.pipeline import ScanPipeline
from ..reporting.exporter import ReportExporter
from .formatters import (
    create_progress,
    print_error,
    print_failures,
    print_group,
    print_info,
    print_success,
    print_summary,
    print_warning,
)

logger = get_logger(__name__)

REPORT_FORMATS = ("csv", "json")


def _run_pipeline(config: ScanConfig) -> ScanResult:
    """Run the scan in a worker thread so Ctrl-C can request cancellation."""
    pipeline = ScanPipeline(config)
    cancel_event = threading.Event()
    outcome: dict[str, object] = {}
    progress = create_progress()

    with progress:
        task = progress.add_task("[cyan]Fingerprinting files...", total=None)

        def on_progress(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        def target() -> None:
            try:
                outcome["result"] = pipeline.run(cancel_event, on_progress)
            except BaseException as e:  # re-raised below
                outcome["error"] = e

        worker = threading.Thread(target=target, name="block-dedup-scan", daemon=True)
        worker.start()
        try:
            while worker.is_alive():
                worker.join(0.1)
        except KeyboardInterrupt:
            progress.update(task, description="[yellow]Cancelling...")
            cancel_event.set()
            while worker.is_alive():
                try:
                    worker.join(0.1)
                except KeyboardInterrupt:
                    continue

        progress.update(task, description="[green]Scan complete!")

    if "error" in outcome:
        raise outcome["error"]  # type: ignore[misc]
    return outcome["result"]  # type: ignore[return-value]


def run_scan(
    config: ScanConfig,
    output: Optional[Path] = None,
    report_format: str = "json",
) -> ScanResult:
    """Run a scan, print the results and optionally export a report.

    Raises:
        typer.Exit: With code 130 if the scan was cancelled
    """
    print_info(
        f"Scanning {len(config.directories)} directories "
        f"(mask={config.mask}, block size={config.block_size}, "
        f"{'recursive' if config.recursive else 'flat'})"
    )

    result = _run_pipeline(config)

    if result.partial:
        print_warning("Scan was cancelled: the results below are PARTIAL")

    if result.failures:
        print_warning(f"{len(result.failures)} paths could not be read:")
        print_failures(result.failures)

    if result.groups:
        for group in result.groups:
            print_group(group)
    else:
        print_success("No duplicates found!")

    print_summary(result)

    if output is not None:
        exporter = ReportExporter()
        if report_format == "csv":
            exporter.export_csv(result, output)
        else:
            exporter.export_json(result, output)
        print_success(f"Exported report to: {output}")

    if result.partial:
        raise typer.Exit(EXIT_CANCELLED)
    return result


def scan(
    directories: List[Path] = typer.Argument(
        ..., help="Directories to scan"
    ),
    exclude: Optional[List[Path]] = typer.Option(
        None, "--exclude", "-x", help="Skip files whose parent is exactly this directory"
    ),
    mask: Optional[str] = typer.Option(
        None, "--mask", "-m", help="File name mask, e.g. '*.txt' or 'file?.txt'"
    ),
    min_size: Optional[int] = typer.Option(
        None, "--min-size", help="Minimum file size in bytes (default 1)"
    ),
    block_size: Optional[int] = typer.Option(
        None, "--block-size", "-b", help="Block size in bytes (default 4096)"
    ),
    recursive: Optional[bool] = typer.Option(
        None, "--recursive/--flat", help="Descend into subdirectories or not"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Number of fingerprinting threads"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write a report to this file"
    ),
    format: str = typer.Option(
        "json", "--format", "-f", help="Report format: csv or json"
    ),
) -> None:
    """Find duplicate files by comparing block fingerprints."""
    settings = get_settings()

    try:
        if format.lower() not in REPORT_FORMATS:
            raise ConfigError(f"Invalid format: {format}. Must be 'csv' or 'json'")

        config = ScanConfig.create(
            directories=[str(d) for d in directories],
            excluded_dirs=[str(d) for d in exclude or []],
            mask=mask if mask is not None else settings.mask,
            min_size=min_size if min_size is not None else settings.min_file_size,
            block_size=block_size if block_size is not None else settings.block_size,
            recursive=recursive if recursive is not None else settings.recursive,
            workers=workers if workers is not None else settings.workers,
        )
        run_scan(config, output, format.lower())

    except ConfigError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(EXIT_ERROR)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        print_error(f"Scan failed: {e}")
        logger.exception("Scan error")
        raise typer.Exit(EXIT_ERROR)


def _prompt_paths(count_prompt: str, path_prompt: str) -> list[str]:
    count = typer.prompt(count_prompt, type=int)
    if count < 0:
        raise ConfigError(f"Number of directories cannot be negative, got {count}")
    return [typer.prompt(path_prompt.format(i + 1)) for i in range(count)]


def interactive() -> None:
    """Ask for the scan settings on the console, then scan."""
    settings = get_settings()

    try:
        directories = _prompt_paths(
            "Enter the number of directories to scan",
            "Enter the path to the directory {}",
        )
        excluded = _prompt_paths(
            "Enter the number of directories to exclude",
            "Enter the path to the directory {} to exclude",
        )
        scan_level = typer.prompt(
            "Enter the scan level (0 - only the specified directory "
            "without nested ones, 1 - with nested ones)",
            type=int,
            default=1 if settings.recursive else 0,
        )
        if scan_level not in (0, 1):
            raise ConfigError(f"Scan level must be 0 or 1, got {scan_level}")
        mask = typer.prompt(
            "Enter a file name mask for comparison (for example, *.txt or file?.txt)",
            default=settings.mask,
        )
        block_size = typer.prompt(
            "Enter the block size (recommended value is 4096)",
            type=int,
            default=settings.block_size,
        )

        config = ScanConfig.create(
            directories=directories,
            excluded_dirs=excluded,
            mask=mask,
            min_size=settings.min_file_size,
            block_size=block_size,
            recursive=scan_level == 1,
            workers=settings.workers,
        )
        run_scan(config)

    except ConfigError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(EXIT_ERROR)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        print_error(f"Scan failed: {e}")
        logger.exception("Scan error")
        raise typer.Exit(EXIT_ERROR)
