"""Bollinger Bands indicator."""

from collections.abc import Sequence

from domain.indicators._validation import require_length, require_multiplier, require_period
from domain.indicators.moving_averages import sma


def bollinger_bands(
    closes: Sequence[float],
    period: int = 20,
    k: float = 2.0
) -> tuple[list[float | None], list[float | None], list[float | None]]:
    """Calculate Bollinger Bands.

    Upper Band = SMA + (k * standard_deviation)
    Middle Band = SMA
    Lower Band = SMA - (k * standard_deviation)

    Standard deviation is the population form (divides by period) over
    the same window as the SMA.

    Args:
        closes: List of closing prices
        period: Period for SMA and standard deviation (default: 20)
        k: Number of standard deviations for bands (default: 2.0)

    Returns:
        Tuple of (upper_band, middle_band, lower_band)
        Each is a list with None for the first (period - 1) points

    Raises:
        InvalidParameterError: If period < 1 or k is negative/non-finite
        InsufficientDataError: If len(closes) < period

    Example:
        >>> prices = [20, 21, 22, 23, 24, 25, 24, 23, 22, 21,
        ...           20, 21, 22, 23, 24, 25, 26, 27, 28, 29,
        ...           30, 29, 28, 27, 26]
        >>> upper, middle, lower = bollinger_bands(prices, period=20)
        >>> middle[-1]  # Most recent SMA
        25.0
    """
    require_period("bollinger_bands", "period", period)
    require_multiplier("bollinger_bands", "k", k)
    require_length("bollinger_bands", closes, period)

    middle_band = sma(closes, period)

    upper_band: list[float | None] = [None] * (period - 1)
    lower_band: list[float | None] = [None] * (period - 1)

    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1:i + 1]

        mean = middle_band[i]
        variance = sum((x - mean) ** 2 for x in window) / period
        width = k * variance ** 0.5

        upper_band.append(mean + width)
        lower_band.append(mean - width)

    return (upper_band, middle_band, lower_band)
