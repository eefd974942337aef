"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class SmaConfig(BaseModel):
    """Simple moving average defaults."""

    period: int = Field(default=20, ge=1)


class EmaConfig(BaseModel):
    """Exponential moving average defaults."""

    period: int = Field(default=20, ge=1)


class BollingerConfig(BaseModel):
    """Bollinger Bands defaults."""

    period: int = Field(default=20, ge=1)
    k: float = Field(default=2.0, ge=0.0, le=10.0, description="Standard deviation multiplier")


class RsiConfig(BaseModel):
    """RSI defaults."""

    period: int = Field(default=14, ge=1)


class MacdConfig(BaseModel):
    """MACD defaults."""

    fast: int = Field(default=12, ge=1)
    slow: int = Field(default=26, ge=2)
    signal: int = Field(default=9, ge=1)

    @field_validator("slow")
    @classmethod
    def slow_gt_fast(cls, v: int, info) -> int:
        fast = info.data.get("fast", 12)
        if v <= fast:
            raise ValueError("slow must be greater than fast")
        return v


class AtrConfig(BaseModel):
    """ATR defaults."""

    period: int = Field(default=14, ge=1)


class StochasticConfig(BaseModel):
    """Stochastic Oscillator defaults."""

    k_period: int = Field(default=14, ge=1)
    d_period: int = Field(default=3, ge=1)


class IndicatorDefaultsConfig(BaseModel):
    """Default parameters per indicator, used when an overlay omits them."""

    sma: SmaConfig = Field(default_factory=SmaConfig)
    ema: EmaConfig = Field(default_factory=EmaConfig)
    bollinger: BollingerConfig = Field(default_factory=BollingerConfig)
    rsi: RsiConfig = Field(default_factory=RsiConfig)
    macd: MacdConfig = Field(default_factory=MacdConfig)
    atr: AtrConfig = Field(default_factory=AtrConfig)
    stochastic: StochasticConfig = Field(default_factory=StochasticConfig)


class ExportConfig(BaseModel):
    """Output preferences."""

    float_precision: int = Field(default=6, ge=0, le=15)
    date_format: str = Field(default="%Y-%m-%d", min_length=1)


class LoggingConfig(BaseModel):
    """Logging preferences."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper().strip() if isinstance(v, str) else v


class OverlayKitConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    indicators: IndicatorDefaultsConfig = Field(default_factory=IndicatorDefaultsConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
