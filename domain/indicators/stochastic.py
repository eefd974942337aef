"""Stochastic Oscillator indicators."""

from collections.abc import Sequence

from domain.indicators._validation import require_length, require_period, require_same_length
from domain.indicators.moving_averages import sma
from domain.indicators.utils import defined_points, highest, lowest, scatter


def stochastic(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    k_period: int = 14,
    d_period: int = 3
) -> tuple[list[float | None], list[float | None]]:
    """Calculate Stochastic Oscillator (%K and %D).

    %K = 100 * (Close - Lowest Low) / (Highest High - Lowest Low)
    %D = SMA of %K

    Args:
        highs: List of high prices
        lows: List of low prices
        closes: List of closing prices
        k_period: Lookback period for %K (default: 14)
        d_period: SMA period for %D (default: 3)

    Returns:
        Tuple of (k_values, d_values)
        Each is a list with None for insufficient data points

    Raises:
        InvalidParameterError: If a period is < 1 or the columns differ in length
        InsufficientDataError: If fewer than k_period bars

    Example:
        >>> highs = [50, 51, 52, 53, 54, 55, 56, 57, 58, 59, 60, 61, 62, 63, 64]
        >>> lows = [48, 49, 50, 51, 52, 53, 54, 55, 56, 57, 58, 59, 60, 61, 62]
        >>> closes = [49, 50, 51, 52, 53, 54, 55, 56, 57, 58, 59, 60, 61, 62, 63]
        >>> k, d = stochastic(highs, lows, closes, 14, 3)
        >>> round(k[-1], 2)  # Most recent %K
        93.33

    Notes:
        - Returns values on 0-100 scale
        - A flat window (highest high == lowest low) gives %K = 50
        - %D is all None when fewer than d_period %K values exist
    """
    require_period("stochastic", "k_period", k_period)
    require_period("stochastic", "d_period", d_period)
    require_same_length("stochastic", highs, lows, closes)
    require_length("stochastic", closes, k_period)

    highest_highs = highest(highs, k_period)
    lowest_lows = lowest(lows, k_period)

    k_values: list[float | None] = [None] * (k_period - 1)

    for i in range(k_period - 1, len(closes)):
        highest_high = highest_highs[i]
        lowest_low = lowest_lows[i]

        # WHY: Prevent division by zero in flat markets
        if highest_high == lowest_low:
            k_values.append(50.0)
        else:
            k = 100.0 * (closes[i] - lowest_low) / (highest_high - lowest_low)
            k_values.append(k)

    # WHY: %D averages the defined %K points only, then maps back
    indices, defined_k = defined_points(k_values)
    if len(defined_k) < d_period:
        return (k_values, [None] * len(closes))

    d_values = scatter(indices, sma(defined_k, d_period), len(closes))

    return (k_values, d_values)
