"""CSV and JSON export functionality."""

import csv
import json
from pathlib import Path

from ..common.logging import get_logger
from ..detector.models import ScanResult

logger = get_logger(__name__)

CSV_HEADER = ["status", "group_id", "key", "size", "count", "path", "kind", "message"]


class ReportExporter:
    """Exports scan results to CSV or JSON."""

    def export_csv(self, result: ScanResult, output_path: Path) -> None:
        """Export duplicate groups and failures to CSV, one row per path.

        Every row carries the run status, ``complete`` or ``partial``. Group
        rows leave ``kind`` and ``message`` empty; failure rows leave the
        group columns empty. A result with neither still gets one status row.

        Args:
            result: Scan result
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        status = "partial" if result.partial else "complete"

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)

            writer.writerow(CSV_HEADER)

            for group in result.groups:
                for path in group.paths:
                    writer.writerow([
                        status,
                        group.group_id,
                        group.key.hex(),
                        group.size,
                        group.count,
                        path,
                        "",
                        "",
                    ])

            for failure in result.failures:
                writer.writerow([status, "", "", "", "", failure.path, failure.kind, failure.message])

            if not result.groups and not result.failures:
                writer.writerow([status] + [""] * (len(CSV_HEADER) - 1))

        logger.info(
            f"Exported {len(result.groups)} groups and {len(result.failures)} "
            f"failures to CSV: {output_path}"
        )

    def export_json(self, result: ScanResult, output_path: Path) -> None:
        """Export groups, failures and totals to JSON.

        Args:
            result: Scan result
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "partial": result.partial,
            "entries_seen": result.entries_seen,
            "candidates": result.candidates,
            "total_groups": len(result.groups),
            "total_files": result.duplicate_files,
            "total_wasted_space": result.wasted_size,
            "groups": [
                {
                    "group_id": group.group_id,
                    "key": group.key.hex(),
                    "blocks": group.block_count,
                    "size": group.size,
                    "count": group.count,
                    "wasted_size": group.wasted_size,
                    "paths": list(group.paths),
                }
                for group in result.groups
            ],
            "failures": [
                {"path": f.path, "kind": f.kind, "message": f.message}
                for f in result.failures
            ],
        }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Exported {len(result.groups)} groups to JSON: {output_path}")
