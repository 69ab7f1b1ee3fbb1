"""CSV export of time entries."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

from core.models import TimeEntry
from core.reporting.contexts import EXPORT_HEADERS, ExportLookups
from core.services.common.durations import format_duration
from core.services.importing.csv_parser import BOM


def entries_to_csv(entries: Iterable[TimeEntry], lookups: ExportLookups) -> str:
    """Render entries with the export headers.

    Fields holding a comma, quote or line break are quoted by the csv module.
    Duration reads ``H:MM`` and billable ``Yes``/``No``.
    """
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=EXPORT_HEADERS, lineterminator="\n")
    writer.writeheader()
    for entry in entries:
        row = lookups.describe(entry)
        row["Duration"] = format_duration(entry.duration_minutes)
        row["Billable"] = "Yes" if entry.billable else "No"
        writer.writerow(row)
    return buf.getvalue()


def write_csv(text: str, output_path: Path) -> Path:
    """Write CSV text with a UTF-8 BOM so spreadsheet tools pick the right encoding."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(BOM + text, encoding="utf-8", newline="")
    return output_path
