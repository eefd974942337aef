"""Shared argument guards for indicator functions."""

import math
from collections.abc import Sequence

from domain.errors import InsufficientDataError, InvalidParameterError


def require_period(indicator: str, name: str, value: int) -> None:
    """Raise InvalidParameterError unless value is an int >= 1."""
    # WHY: bool is an int subclass, True would silently mean period=1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(indicator, name, value, "must be an integer")
    if value < 1:
        raise InvalidParameterError(indicator, name, value, "must be >= 1")


def require_multiplier(indicator: str, name: str, value: float) -> None:
    """Raise InvalidParameterError unless value is a finite real >= 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(indicator, name, value, "must be a number")
    if not math.isfinite(value) or value < 0:
        raise InvalidParameterError(indicator, name, value, "must be finite and >= 0")


def require_length(indicator: str, values: Sequence[float], required: int) -> None:
    """Raise InsufficientDataError if values has fewer than required points."""
    if len(values) < required:
        raise InsufficientDataError(indicator, required=required, actual=len(values))


def require_same_length(
    indicator: str,
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
) -> None:
    """Raise InvalidParameterError if the price columns differ in length."""
    if len(highs) != len(lows) or len(highs) != len(closes):
        raise InvalidParameterError.length_mismatch(
            indicator,
            {"highs": len(highs), "lows": len(lows), "closes": len(closes)},
        )
