"""Technical indicators library for chart overlays.

This package provides pure Python implementations of the indicators drawn
as chart overlays. Every function takes plain lists (oldest first) and
returns lists of the same length, with None during the warm-up window.

Indicators:
    - SMA / EMA: Moving averages (EMA seeded from the SMA of the first period)
    - Bollinger Bands: Volatility bands using population standard deviation
    - RSI: Relative Strength Index using Wilder's smoothing
    - MACD: Moving Average Convergence Divergence
    - ATR: Average True Range using Wilder's smoothing
    - Stochastic: Stochastic Oscillator (%K and %D)
    - Utils: highest, lowest, defined_points, scatter

Errors:
    Too-short input raises InsufficientDataError, bad periods raise
    InvalidParameterError. Nothing is zero-filled.

Example:
    >>> from domain.indicators import rsi, macd, bollinger_bands
    >>>
    >>> closes = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
    ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
    >>>
    >>> rsi_values = rsi(closes, period=14)
    >>> upper, middle, lower = bollinger_bands(closes, period=10)
"""

from domain.indicators.atr import atr, true_range
from domain.indicators.bollinger import bollinger_bands
from domain.indicators.macd import macd
from domain.indicators.moving_averages import ema, sma
from domain.indicators.rsi import rsi
from domain.indicators.stochastic import stochastic
from domain.indicators.utils import defined_points, highest, lowest, scatter

__all__ = [
    # Moving averages
    "sma",
    "ema",
    # Bands and oscillators
    "bollinger_bands",
    "rsi",
    "macd",
    "stochastic",
    # Volatility
    "atr",
    "true_range",
    # Utilities
    "highest",
    "lowest",
    "defined_points",
    "scatter",
]
