"""Utility functions for technical analysis."""

from collections.abc import Sequence


def highest(values: Sequence[float], period: int) -> list[float | None]:
    """Find highest value over rolling period.

    Args:
        values: List of values
        period: Lookback period

    Returns:
        List of highest values for each period

    Example:
        >>> prices = [10, 12, 11, 15, 14, 13]
        >>> highest(prices, 3)
        [None, None, 12, 15, 15, 15]

    Notes:
        - Returns None for first (period - 1) values
        - Returns all None when values is shorter than period
    """
    if period <= 0 or len(values) < period:
        return [None] * len(values)

    result: list[float | None] = [None] * (period - 1)

    for i in range(period - 1, len(values)):
        result.append(max(values[i - period + 1:i + 1]))

    return result


def lowest(values: Sequence[float], period: int) -> list[float | None]:
    """Find lowest value over rolling period.

    Args:
        values: List of values
        period: Lookback period

    Returns:
        List of lowest values for each period

    Example:
        >>> prices = [10, 12, 11, 15, 14, 13]
        >>> lowest(prices, 3)
        [None, None, 10, 11, 11, 13]
    """
    if period <= 0 or len(values) < period:
        return [None] * len(values)

    result: list[float | None] = [None] * (period - 1)

    for i in range(period - 1, len(values)):
        result.append(min(values[i - period + 1:i + 1]))

    return result


def defined_points(series: Sequence[float | None]) -> tuple[list[int], list[float]]:
    """Collect the defined values of a series with their original indices.

    Example:
        >>> defined_points([None, None, 1.5, 2.0])
        ([2, 3], [1.5, 2.0])
    """
    indices = []
    values = []
    for i, value in enumerate(series):
        if value is not None:
            indices.append(i)
            values.append(value)
    return indices, values


def scatter(
    indices: Sequence[int],
    values: Sequence[float | None],
    length: int,
) -> list[float | None]:
    """Place values back at their original indices in a series of given length.

    Inverse of defined_points: positions not named in indices are None.

    Example:
        >>> scatter([2, 3], [None, 4.0], 4)
        [None, None, None, 4.0]
    """
    if len(indices) != len(values):
        raise ValueError("indices and values must have same length")

    result: list[float | None] = [None] * length
    for i, value in zip(indices, values):
        result[i] = value
    return result
