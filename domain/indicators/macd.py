"""MACD (Moving Average Convergence Divergence) indicator."""

from collections.abc import Sequence

from domain.errors import InvalidParameterError
from domain.indicators._validation import require_length, require_period
from domain.indicators.moving_averages import ema
from domain.indicators.utils import defined_points, scatter


def macd(
    closes: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9
) -> tuple[list[float | None], list[float | None], list[float | None]]:
    """Calculate MACD indicator.

    MACD Line = EMA(fast) - EMA(slow)
    Signal Line = EMA(MACD Line, signal periods)
    Histogram = MACD Line - Signal Line

    Args:
        closes: List of closing prices
        fast: Fast EMA period (default: 12)
        slow: Slow EMA period (default: 26)
        signal: Signal line EMA period (default: 9)

    Returns:
        Tuple of (macd_line, signal_line, histogram)
        Each is a list with None for insufficient data points

    Raises:
        InvalidParameterError: If a period is < 1 or fast >= slow
        InsufficientDataError: If len(closes) < slow

    Example:
        >>> prices = list(range(10, 50))
        >>> macd_line, signal_line, histogram = macd(prices)
        >>> macd_line[25] is not None, signal_line[33] is not None
        (True, True)

    Notes:
        - MACD line starts at index (slow - 1)
        - Signal line starts at index (slow + signal - 2)
        - With fewer than 'signal' MACD points, signal and histogram are all None
    """
    require_period("macd", "fast", fast)
    require_period("macd", "slow", slow)
    require_period("macd", "signal", signal)
    if fast >= slow:
        raise InvalidParameterError(
            "macd", "fast", fast, f"must be less than slow ({slow})"
        )
    require_length("macd", closes, slow)

    fast_ema = ema(closes, fast)
    slow_ema = ema(closes, slow)

    macd_line: list[float | None] = []
    for f, s in zip(fast_ema, slow_ema):
        if f is None or s is None:
            macd_line.append(None)
        else:
            macd_line.append(f - s)

    signal_line: list[float | None] = [None] * len(closes)
    histogram: list[float | None] = [None] * len(closes)

    # WHY: Signal EMA runs over defined MACD points only, then maps back
    indices, macd_values = defined_points(macd_line)
    if len(macd_values) < signal:
        return (macd_line, signal_line, histogram)

    signal_line = scatter(indices, ema(macd_values, signal), len(closes))

    for i, (m, s) in enumerate(zip(macd_line, signal_line)):
        if m is not None and s is not None:
            histogram[i] = m - s

    return (macd_line, signal_line, histogram)
