"""
Data export utilities.

Write computed overlays out as CSV columns or JSON, aligned with the
bars they were computed from.
"""

import csv
import io
import json
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from domain.overlays import OverlayResult
from .json_api import format_date, to_json


# ============================================================================
# CSV Export
# ============================================================================

def overlay_to_csv(
    result: OverlayResult,
    dates: Sequence[datetime | None] | None = None,
    precision: int = 6,
    date_format: str = "%Y-%m-%d",
    include_header: bool = True,
) -> str:
    """
    Render an overlay as CSV text.

    One column per output line, headed '<name> <line>' when the overlay has
    several lines and '<name>' otherwise. A leading date column is added
    when dates are given. "No value" points are written as empty cells.

    Args:
        result: Computed overlay
        dates: Bar dates aligned with the series (optional)
        precision: Decimal places to write
        date_format: strftime format for dates
        include_header: Include header row
    """
    lines = list(result.series)
    if len(lines) == 1:
        headers = [result.name]
    else:
        headers = [f"{result.name} {line}" for line in lines]
    if dates is not None:
        headers = ["date"] + headers

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    if include_header:
        writer.writerow(headers)

    for i in range(len(result)):
        row = []
        if dates is not None:
            row.append(format_date(dates[i], date_format) or "")
        for line in lines:
            value = result.series[line][i]
            row.append("" if value is None else f"{value:.{precision}f}")
        writer.writerow(row)

    return buffer.getvalue()


def export_overlay_csv(
    result: OverlayResult,
    filepath: str | Path,
    dates: Sequence[datetime | None] | None = None,
    precision: int = 6,
    date_format: str = "%Y-%m-%d",
    include_header: bool = True,
) -> None:
    """Write an overlay to a CSV file."""
    content = overlay_to_csv(result, dates, precision, date_format, include_header)
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        f.write(content)


# ============================================================================
# JSON Export
# ============================================================================

def overlay_to_json_text(
    result: OverlayResult,
    dates: Sequence[datetime | None] | None = None,
    precision: int = 6,
    date_format: str = "%Y-%m-%d",
) -> str:
    """Render an overlay as indented JSON text."""
    return json.dumps(to_json(result, dates, precision, date_format), indent=2)


def export_overlay_json(
    result: OverlayResult,
    filepath: str | Path,
    dates: Sequence[datetime | None] | None = None,
    precision: int = 6,
    date_format: str = "%Y-%m-%d",
) -> None:
    """Write an overlay to a JSON file."""
    Path(filepath).write_text(
        overlay_to_json_text(result, dates, precision, date_format),
        encoding="utf-8",
    )
