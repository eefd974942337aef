"""
JSON response types.

Structured overlay payloads for chart front-ends. Absent values are
serialized as null, never as 0 or NaN.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from domain.overlays import OverlayResult


class OverlayResponse(BaseModel):
    """Response for one computed overlay."""
    name: str
    type: str
    parameters: dict[str, Any] = Field(default_factory=dict)
    dates: list[str | None] = Field(default_factory=list)
    series: dict[str, list[float | None]]


def format_date(value: datetime | None, date_format: str = "%Y-%m-%d") -> str | None:
    """Format a bar date, passing None through."""
    return value.strftime(date_format) if value else None


def round_series(values: Sequence[float | None], precision: int) -> list[float | None]:
    """Round defined values, keeping None markers."""
    return [None if v is None else round(v, precision) for v in values]


def to_overlay_response(
    result: OverlayResult,
    dates: Sequence[datetime | None] | None = None,
    precision: int = 6,
    date_format: str = "%Y-%m-%d",
) -> OverlayResponse:
    """
    Convert an OverlayResult to its response model.

    Args:
        result: Computed overlay
        dates: Bar dates aligned with the series (optional)
        precision: Decimal places to round to
        date_format: strftime format for dates
    """
    return OverlayResponse(
        name=result.name,
        type=result.overlay_type.value,
        parameters=result.parameters,
        dates=[format_date(d, date_format) for d in (dates or [])],
        series={
            line: round_series(values, precision)
            for line, values in result.series.items()
        },
    )


def to_json(
    result: OverlayResult,
    dates: Sequence[datetime | None] | None = None,
    precision: int = 6,
    date_format: str = "%Y-%m-%d",
) -> dict[str, Any]:
    """Convert an OverlayResult to a JSON-serializable dict."""
    return to_overlay_response(result, dates, precision, date_format).model_dump()
