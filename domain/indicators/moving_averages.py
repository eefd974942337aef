"""Moving average indicators."""

from collections.abc import Sequence

from domain.indicators._validation import require_length, require_period


def sma(values: Sequence[float], period: int) -> list[float | None]:
    """Calculate Simple Moving Average.

    Args:
        values: Values to average, oldest first
        period: Number of periods for the moving average

    Returns:
        List of SMA values, same length as values, with None for the
        first (period - 1) points

    Raises:
        InvalidParameterError: If period is not an integer >= 1
        InsufficientDataError: If len(values) < period

    Example:
        >>> prices = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        >>> sma(prices, 3)
        [None, None, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]
    """
    require_period("sma", "period", period)
    require_length("sma", values, period)

    result: list[float | None] = [None] * (period - 1)

    # WHY: Direct window sum keeps every point independent of rounding drift
    for i in range(period - 1, len(values)):
        window = values[i - period + 1:i + 1]
        result.append(sum(window) / period)

    return result


def ema(values: Sequence[float], period: int) -> list[float | None]:
    """Calculate Exponential Moving Average.

    Uses alpha = 2/(period+1), seeded with the SMA of the first 'period'
    values rather than the first raw value.

    Args:
        values: Values to average, oldest first
        period: Number of periods for the moving average

    Returns:
        List of EMA values, same length as values, with None for the
        first (period - 1) points

    Raises:
        InvalidParameterError: If period is not an integer >= 1
        InsufficientDataError: If len(values) < period

    Example:
        >>> prices = [10, 11, 12, 13, 14, 15]
        >>> ema(prices, 3)
        [None, None, 11.0, 12.0, 13.0, 14.0]
    """
    require_period("ema", "period", period)
    require_length("ema", values, period)

    alpha = 2.0 / (period + 1)
    result: list[float | None] = [None] * (period - 1)

    # WHY: Seed must match sma(values, period)[period - 1] exactly
    prev_ema = sum(values[:period]) / period
    result.append(prev_ema)

    for i in range(period, len(values)):
        prev_ema = (values[i] - prev_ema) * alpha + prev_ema
        result.append(prev_ema)

    return result
