"""
Overlay dispatch.

Maps an OverlaySpec (type, optional period, extra parameters) onto the
matching indicator function. Parameters missing from the spec come from
the configured indicator defaults. The indicator functions still do all
numeric validation.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from config import get_config
from config.schema import IndicatorDefaultsConfig

from .enums import OverlayType
from .errors import InvalidParameterError
from .indicators import atr, bollinger_bands, ema, macd, rsi, sma, stochastic
from .models import OHLCBar, PriceSeries

logger = logging.getLogger(__name__)

Series = list[float | None]

# Parameter that OverlaySpec.period maps to; None means period is not accepted
PERIOD_FIELD: dict[OverlayType, str | None] = {
    OverlayType.SMA: "period",
    OverlayType.EMA: "period",
    OverlayType.BOLLINGER_BANDS: "period",
    OverlayType.VOLUME: None,
    OverlayType.RSI: "period",
    OverlayType.MACD: None,
    OverlayType.ATR: "period",
    OverlayType.STOCHASTIC: "k_period",
}


@dataclass
class OverlaySpec:
    """Request for one chart overlay."""
    type: OverlayType
    name: str | None = None
    period: int | None = None
    parameters: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.type, OverlayType):
            try:
                self.type = OverlayType(str(self.type).lower())
            except ValueError:
                choices = ", ".join(t.value for t in OverlayType)
                raise InvalidParameterError(
                    "overlay", "type", self.type, f"must be one of: {choices}"
                ) from None


@dataclass
class OverlayResult:
    """Computed overlay: one or more named output lines aligned to the input bars."""
    name: str
    overlay_type: OverlayType
    parameters: dict[str, Any]
    series: dict[str, Series]

    def __len__(self) -> int:
        return len(next(iter(self.series.values()), []))


def default_parameters(
    overlay_type: OverlayType,
    defaults: IndicatorDefaultsConfig | None = None,
) -> dict[str, Any]:
    """Get the configured default parameters for an overlay type."""
    if overlay_type == OverlayType.VOLUME:
        return {}
    defaults = defaults or get_config().indicators
    return getattr(defaults, overlay_type.value).model_dump()


def resolve_parameters(
    spec: OverlaySpec,
    defaults: IndicatorDefaultsConfig | None = None,
) -> dict[str, Any]:
    """
    Merge spec.period and spec.parameters over the defaults.

    Raises:
        InvalidParameterError: If a parameter is not known for the overlay type
    """
    params = default_parameters(spec.type, defaults)
    indicator = spec.type.value

    if spec.period is not None:
        period_field = PERIOD_FIELD[spec.type]
        if period_field is None:
            raise InvalidParameterError(
                indicator, "period", spec.period, "not supported, set parameters instead"
            )
        params[period_field] = spec.period

    for key, value in spec.parameters.items():
        if key not in params:
            allowed = ", ".join(params) or "none"
            raise InvalidParameterError(
                indicator, key, value, f"unknown parameter (allowed: {allowed})"
            )
        params[key] = value

    return params


def default_name(overlay_type: OverlayType, params: dict[str, Any]) -> str:
    """Build a legend label such as 'SMA(20)' or 'MACD(12,26,9)'."""
    label = {
        OverlayType.SMA: "SMA",
        OverlayType.EMA: "EMA",
        OverlayType.BOLLINGER_BANDS: "Bollinger",
        OverlayType.VOLUME: "Volume",
        OverlayType.RSI: "RSI",
        OverlayType.MACD: "MACD",
        OverlayType.ATR: "ATR",
        OverlayType.STOCHASTIC: "Stochastic",
    }[overlay_type]
    if not params:
        return label
    return f"{label}({','.join(str(v) for v in params.values())})"


def _sma(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    return {"sma": sma(prices.closes, p["period"])}


def _ema(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    return {"ema": ema(prices.closes, p["period"])}


def _bollinger(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    upper, middle, lower = bollinger_bands(prices.closes, p["period"], p["k"])
    return {"upper": upper, "middle": middle, "lower": lower}


def _volume(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    return {"volume": list(prices.volumes)}


def _rsi(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    return {"rsi": rsi(prices.closes, p["period"])}


def _macd(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    line, signal, histogram = macd(prices.closes, p["fast"], p["slow"], p["signal"])
    return {"macd": line, "signal": signal, "histogram": histogram}


def _atr(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    return {"atr": atr(prices.highs, prices.lows, prices.closes, p["period"])}


def _stochastic(prices: PriceSeries, p: dict[str, Any]) -> dict[str, Series]:
    k, d = stochastic(prices.highs, prices.lows, prices.closes, p["k_period"], p["d_period"])
    return {"k": k, "d": d}


_CALCULATORS: dict[OverlayType, Callable[[PriceSeries, dict[str, Any]], dict[str, Series]]] = {
    OverlayType.SMA: _sma,
    OverlayType.EMA: _ema,
    OverlayType.BOLLINGER_BANDS: _bollinger,
    OverlayType.VOLUME: _volume,
    OverlayType.RSI: _rsi,
    OverlayType.MACD: _macd,
    OverlayType.ATR: _atr,
    OverlayType.STOCHASTIC: _stochastic,
}


def compute_overlay(
    spec: OverlaySpec,
    prices: PriceSeries | Sequence[OHLCBar],
    defaults: IndicatorDefaultsConfig | None = None,
) -> OverlayResult:
    """
    Compute one overlay over a price series.

    Args:
        spec: Overlay request
        prices: PriceSeries, or bars to convert into one
        defaults: Indicator defaults (default: loaded configuration)

    Returns:
        OverlayResult with every line the same length as prices

    Raises:
        InvalidParameterError: Unknown or invalid parameters
        InsufficientDataError: Too few bars for the requested periods
    """
    if not isinstance(prices, PriceSeries):
        prices = PriceSeries.from_bars(prices)

    params = resolve_parameters(spec, defaults)
    name = spec.name or default_name(spec.type, params)

    logger.debug(f"Computing {name} over {len(prices)} bars")
    series = _CALCULATORS[spec.type](prices, params)

    return OverlayResult(
        name=name,
        overlay_type=spec.type,
        parameters=params,
        series=series,
    )
