"""
Price data models.

OHLCBar is the row form (one record per time step), PriceSeries the
column form the indicator functions consume. Both are plain data: the
engine never validates bars, that is left to whoever sources them.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class OHLCBar:
    """
    Single OHLC(V) data point.

    Invariants (checked by is_valid, not enforced on construction):
    high >= low, open and close within [low, high], volume >= 0 if present.
    """
    open: float
    high: float
    low: float
    close: float
    volume: float | None = None
    date: datetime | None = None

    @property
    def is_bullish(self) -> bool:
        return self.close >= self.open

    @property
    def is_bearish(self) -> bool:
        return self.close < self.open

    @property
    def body_size(self) -> float:
        return abs(self.close - self.open)

    @property
    def range(self) -> float:
        return self.high - self.low

    @property
    def upper_wick(self) -> float:
        return self.high - max(self.open, self.close)

    @property
    def lower_wick(self) -> float:
        return min(self.open, self.close) - self.low

    def validation_errors(self) -> list[str]:
        """List the invariants this bar violates (empty when valid)."""
        errors = []
        if self.high < self.low:
            errors.append(f"high {self.high} < low {self.low}")
        if not self.low <= self.open <= self.high:
            errors.append(f"open {self.open} outside [{self.low}, {self.high}]")
        if not self.low <= self.close <= self.high:
            errors.append(f"close {self.close} outside [{self.low}, {self.high}]")
        if self.volume is not None and self.volume < 0:
            errors.append(f"volume {self.volume} < 0")
        return errors

    def is_valid(self) -> bool:
        return not self.validation_errors()

    def __str__(self) -> str:
        date = f"{self.date:%Y-%m-%d} " if self.date else ""
        text = f"{date}O:{self.open:.2f} H:{self.high:.2f} L:{self.low:.2f} C:{self.close:.2f}"
        if self.volume is not None:
            text += f" V:{self.volume:.0f}"
        return text


@dataclass
class PriceSeries:
    """Column-oriented OHLCV data, oldest first.

    Attributes:
        opens: List of opening prices
        highs: List of high prices
        lows: List of low prices
        closes: List of closing prices
        volumes: List of volumes, None where a bar has no volume
        dates: List of bar dates, None where unknown

    Example:
        >>> series = PriceSeries.from_bars([
        ...     OHLCBar(open=100.0, high=102.0, low=99.0, close=101.0),
        ...     OHLCBar(open=101.0, high=103.0, low=100.0, close=102.0),
        ... ])
        >>> series.closes
        [101.0, 102.0]
    """
    opens: list[float] = field(default_factory=list)
    highs: list[float] = field(default_factory=list)
    lows: list[float] = field(default_factory=list)
    closes: list[float] = field(default_factory=list)
    volumes: list[float | None] = field(default_factory=list)
    dates: list[datetime | None] = field(default_factory=list)

    @classmethod
    def from_bars(cls, bars: Iterable[OHLCBar]) -> "PriceSeries":
        """Build column lists from bars."""
        series = cls()
        for bar in bars:
            series.opens.append(bar.open)
            series.highs.append(bar.high)
            series.lows.append(bar.low)
            series.closes.append(bar.close)
            series.volumes.append(bar.volume)
            series.dates.append(bar.date)
        return series

    def __len__(self) -> int:
        return len(self.closes)
