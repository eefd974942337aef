from enum import Enum


class OverlayType(str, Enum):
    """Chart overlay computed from a price series."""
    SMA = "sma"
    EMA = "ema"
    BOLLINGER_BANDS = "bollinger"
    VOLUME = "volume"
    RSI = "rsi"
    MACD = "macd"
    ATR = "atr"
    STOCHASTIC = "stochastic"
