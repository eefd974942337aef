"""Relative Strength Index (RSI) indicator."""

from collections.abc import Sequence

from domain.indicators._validation import require_length, require_period


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    # WHY: No losses in the window means all gains, pinned to 100
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def rsi(closes: Sequence[float], period: int = 14) -> list[float | None]:
    """Calculate RSI using Wilder's smoothing method.

    Returns values on 0-100 scale. Uses Wilder's smoothing (RMA) rather
    than the EMA alpha of 2/(period+1).

    Args:
        closes: List of closing prices
        period: RSI period (default: 14)

    Returns:
        List of RSI values (0-100), with None for the first 'period' points

    Raises:
        InvalidParameterError: If period is not an integer >= 1
        InsufficientDataError: If len(closes) < period + 1

    Example:
        >>> prices = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
        ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
        >>> result = rsi(prices, 14)
        >>> 0 <= result[-1] <= 100  # Most recent RSI
        True

    Notes:
        - Wilder's smoothing: New avg = (prev_avg * (period-1) + current) / period
        - First RSI value appears at index (period), not (period-1)
        - avg_loss == 0 yields exactly 100.0
    """
    require_period("rsi", "period", period)
    require_length("rsi", closes, period + 1)

    result: list[float | None] = [None] * period

    gains = []
    losses = []

    for i in range(1, period + 1):
        change = closes[i] - closes[i - 1]
        gains.append(max(change, 0))
        losses.append(max(-change, 0))

    # WHY: First average is simple average
    avg_gain = sum(gains) / period
    avg_loss = sum(losses) / period
    result.append(_rsi_value(avg_gain, avg_loss))

    for i in range(period + 1, len(closes)):
        change = closes[i] - closes[i - 1]
        gain = max(change, 0)
        loss = max(-change, 0)

        # Wilder's smoothing formula
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period

        result.append(_rsi_value(avg_gain, avg_loss))

    return result
