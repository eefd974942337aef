"""Average True Range (ATR) indicator."""

from collections.abc import Sequence

from domain.indicators._validation import require_length, require_period, require_same_length


def true_range(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
) -> list[float | None]:
    """Calculate True Range for each bar.

    True Range = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Index 0 is None since it has no previous close.

    Raises:
        InvalidParameterError: If the columns differ in length
    """
    require_same_length("true_range", highs, lows, closes)

    result: list[float | None] = [None] if closes else []
    for i in range(1, len(closes)):
        result.append(max(
            highs[i] - lows[i],
            abs(highs[i] - closes[i - 1]),
            abs(lows[i] - closes[i - 1]),
        ))
    return result


def atr(
    highs: Sequence[float],
    lows: Sequence[float],
    closes: Sequence[float],
    period: int = 14
) -> list[float | None]:
    """Calculate Average True Range using Wilder's smoothing.

    ATR = Wilder's smoothed average of True Range

    Args:
        highs: List of high prices
        lows: List of low prices
        closes: List of closing prices
        period: ATR period (default: 14)

    Returns:
        List of ATR values, with None for the first 'period' points

    Raises:
        InvalidParameterError: If period < 1 or the columns differ in length
        InsufficientDataError: If fewer than period + 1 bars

    Example:
        >>> atr([10, 12, 11], [8, 9, 8], [9, 10, 9], period=1)
        [None, 3.0, 3.0]

    Notes:
        - First ATR value is simple average of true ranges 1..period
        - Subsequent values use Wilder's smoothing
    """
    require_period("atr", "period", period)
    require_same_length("atr", highs, lows, closes)
    require_length("atr", closes, period + 1)

    true_ranges = true_range(highs, lows, closes)

    result: list[float | None] = [None] * period

    # WHY: First ATR is simple average of first 'period' true ranges
    atr_value = sum(true_ranges[1:period + 1]) / period
    result.append(atr_value)

    for i in range(period + 1, len(closes)):
        # Wilder's smoothing formula
        atr_value = (atr_value * (period - 1) + true_ranges[i]) / period
        result.append(atr_value)

    return result
